"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

APP_TITLE = "Procedural House Generator"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

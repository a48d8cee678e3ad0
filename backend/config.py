"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()


# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

# Wizard defaults (used when a request omits style / budget)
WIZARD_DEFAULT_STYLE = os.getenv("WIZARD_DEFAULT_STYLE", "modern")
WIZARD_DEFAULT_BUDGET = os.getenv("WIZARD_DEFAULT_BUDGET", "medium")

# config.py
import os

# ========================
# REMOTE SERVICE
# ========================
BACKEND_API_URL = os.environ.get("BACKEND_API_URL", "http://127.0.0.1:5000").rstrip("/")
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "30"))

# ========================
# STATIC ASSETS
# ========================
# Either a local directory or an http(s) base URL
ASSET_BASE_URL = os.environ.get("ASSET_BASE_URL", "assets").rstrip("/")

# ========================
# LOGGING
# ========================
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.environ.get("LOG_DIR", "logs")

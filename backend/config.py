"""
Application Configuration Module

Settings for the property ledger backend are read from environment variables,
optionally loaded from a .env file. The accounting engine itself holds no
state; these values only affect how new journal entries are stamped and how
the HTTP layer is served.
"""

from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

# Timezone used for journal entry created_at timestamps
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "Indian/Mahe")

# Currency stamped on postings whose source record carries none (leases)
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "SCR")

LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

allowed_origins_str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:8081,http://127.0.0.1:8081,http://localhost:19006"
)

# Split the string into a list, stripping any whitespace
CORS_ALLOWED_ORIGINS = [origin.strip() for origin in allowed_origins_str.split(',') if origin.strip()]

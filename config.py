"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Inventory file ────────────────────────────────────────
INVENTORY_ENCODING: str = os.getenv("INVENTORY_ENCODING", "utf-8")

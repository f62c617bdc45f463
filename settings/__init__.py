"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("MGNREGA_DB_PATH", "data/mgnrega.duckdb")
READ_ONLY_DB = os.getenv("READ_ONLY_DB") == "1"

# Logging
LOG_DIR = Path("logs")

# API (data.gov.in - District-wise MGNREGA Data at a Glance)
API_BASE_URL = os.getenv("DATA_GOV_API_URL", "https://api.data.gov.in/resource")
API_RESOURCE_ID = "ee03643a-ee4c-48c2-ac30-9f2ff26ab722"
API_KEY = os.getenv("DATA_GOV_API_KEY", "579b464db66ec23bdd000001cdd3946e44ce4aad7209ff7b23ac571b")
API_TIMEOUT = 10
API_PAGE_LIMIT = 1000

# Tracked state
STATE_NAME = "Andhra Pradesh"

# Cache / history
CACHE_TTL_HOURS = 6
HISTORY_MONTHS = 12
MAX_HISTORY_MONTHS = 60

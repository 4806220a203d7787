"""
User Stats — Configuration: paths, column names, defaults, region table.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with USERSTATS_DATA_DIR / USERSTATS_CSV env vars
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("USERSTATS_DATA_DIR", "."))
DATA_DIR = _data_dir
CSV_PATH = Path(os.environ.get("USERSTATS_CSV", str(_data_dir / "users.csv")))

# ---------------------------------------------------------------------------
# CSV layout (header names matched case-insensitively)
# ---------------------------------------------------------------------------
DELIMITER = ","
NAME_COLUMN = "name"
AGE_COLUMN = "age"
COUNTRY_COLUMN = "country"

# ---------------------------------------------------------------------------
# Aggregation defaults
# ---------------------------------------------------------------------------
DEFAULT_MIN_AGE = 30
DEFAULT_TOP_N = 3

# Rank given to unparseable ages when ordering oldest-first
INVALID_AGE_RANK = -1

# Ages are whole numbers in the signed 32-bit range
AGE_MIN = -(2 ** 31)
AGE_MAX = 2 ** 31 - 1

# ---------------------------------------------------------------------------
# Country → region lookup (exact, case-sensitive names)
# ---------------------------------------------------------------------------
OTHER_REGION = "Other"

REGION_BY_COUNTRY = {
    "Finland": "Europe",
    "Germany": "Europe",
    "France": "Europe",
    "UK": "Europe",
    "USA": "North America",
    "Canada": "North America",
    "Brazil": "South America",
    "India": "Asia",
    "Japan": "Asia",
    "Australia": "Oceania",
}

# ---------------------------------------------------------------------------
# Command surface
# ---------------------------------------------------------------------------
OPERATIONS = ("summary", "filter", "group", "avg", "top", "region")
DEFAULT_OPERATION = "summary"

EXIT_OK = 0
EXIT_NO_DATA = 1
EXIT_UNKNOWN_OPERATION = 2

"""
Centralized constants for mushaf.

Magic numbers, endpoints and user-facing strings live here so the
controller, provider and UI layers agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

MUSHAF_CONFIG_DIR = Path.home() / ".config" / "mushaf"

# =============================================================================
# DATA PROVIDER
# =============================================================================

DEFAULT_API_URL = "https://api.alquran.cloud/v1"
DEFAULT_API_TIMEOUT_SECONDS = 15.0
DEFAULT_API_RETRIES = 2  # Extra attempts after the first, inside one flight
RETRY_MIN_BACKOFF_SECONDS = 0.5
RETRY_MAX_BACKOFF_SECONDS = 4.0

# Envelope code the provider returns on success
API_SUCCESS_CODE = 200

# Detail cache; 0 disables it so every selection refetches
DEFAULT_DETAIL_CACHE_SIZE = 0
DETAIL_CACHE_TTL_SECONDS = 3600

# =============================================================================
# GRID BREAKPOINTS
# =============================================================================

# (narrow_max, medium_max): width < narrow_max -> 1 column, < medium_max -> 2, else 3
PIXEL_BREAKPOINTS = (640, 1024)
TERMINAL_BREAKPOINTS = (80, 140)

# =============================================================================
# USER-FACING TEXT
# =============================================================================

APP_TITLE = "مصحف الذكر"
LIST_FETCH_ERROR = "حدث خطأ في الاتصال بالشبكة."
DETAIL_FETCH_ERROR = "تعذر تحميل نص السورة."
LOADING_TEXT = "جاري جلب السور..."
SEARCH_PLACEHOLDER = "ابحث عن اسم السورة أو رقمها..."
NO_RESULTS_TITLE = "لا توجد نتائج بحث"
NO_RESULTS_HINT = "تأكد من كتابة اسم السورة بشكل صحيح"
BACK_TO_LIST = "العودة للقائمة الكاملة"
BACK_TO_INDEX = "العودة لقائمة السور"
OPENING_FORMULA = "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ"
SUB_ITEM_UNIT = "آية"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

ENV_VAR_DEFINITIONS: dict[str, dict] = {
    "MUSHAF_API_URL": {
        "description": "Base URL of the alquran.cloud compatible API",
        "default": DEFAULT_API_URL,
        "valid_values": None,
    },
    "MUSHAF_API_TIMEOUT": {
        "description": "Request timeout in seconds",
        "default": str(DEFAULT_API_TIMEOUT_SECONDS),
        "valid_values": None,
        "type": float,
    },
    "MUSHAF_API_RETRIES": {
        "description": "Retries for transient connection failures",
        "default": str(DEFAULT_API_RETRIES),
        "valid_values": None,
        "type": int,
    },
    "MUSHAF_DETAIL_CACHE_SIZE": {
        "description": "Number of entry details to keep in memory (0 disables)",
        "default": str(DEFAULT_DETAIL_CACHE_SIZE),
        "valid_values": None,
        "type": int,
    },
    "MUSHAF_LOG_LEVEL": {
        "description": "Log level for the TUI log file",
        "default": "INFO",
        "valid_values": LOG_LEVELS,
    },
}

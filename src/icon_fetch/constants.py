"""Constants and default values used across the application."""

# Favicon Service Constants
DEFAULT_FAVICON_SERVICE_URL = "https://www.google.com/s2/favicons"
DEFAULT_FAVICON_SIZE = 128  # Square icon size in pixels requested from the service
DEFAULT_HTTP_TIMEOUT = 10.0  # Icon download timeout in seconds
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (compatible; IconFetch/0.1; +https://github.com/icon-fetch/icon-fetch)"
)

# Brand Analysis Constants
DEFAULT_ANALYSIS_MODEL = "gemini-3-flash-preview"
DEFAULT_ANALYSIS_TEMPERATURE = 0.4
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")  # Checked in order when no key is configured

# History Constants
HISTORY_MAX_ENTRIES = 15
HISTORY_STORAGE_KEY = "icon_fetch_history"

# Output Display Constants
SUPPORTED_LANGUAGES = ("en", "zh")

# Azure Translator API
TRANSLATOR_API_VERSION = "3.0"
SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
SUBSCRIPTION_REGION_HEADER = "Ocp-Apim-Subscription-Region"
DETECT_ROUTE = "/detect"
TRANSLATE_ROUTE = "/translate"

# Sentinel for languages the provider did not report
UNKNOWN_LANGUAGE = "unknown"

# Retry policy (only HTTP 429 is retried)
MAX_ATTEMPTS = 3
INITIAL_BACKOFF_SECONDS = 1.0
BACKOFF_MULTIPLIER = 2
RATE_LIMIT_STATUS_CODE = 429

# HTTP client defaults
DEFAULT_TRANSLATOR_TIMEOUT_SECONDS = 10.0

# Logging
TEXT_PREVIEW_LENGTH = 50
API_KEY_PREFIX_LENGTH = 4

# CORS
DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]

"""Constants for taskboard.

This module centralizes limits and default values used throughout the application.
"""

# Task field limits
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

# Banner lifetimes (milliseconds)
SUCCESS_BANNER_MS = 5000
ERROR_BANNER_MS = 7000

# Remote API defaults
DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_API_TIMEOUT_SEC = 10

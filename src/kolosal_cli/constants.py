"""Application-level constants for kolosal-cli.

This module keeps cross-cutting app/file constants and the reserved-provider
markers used by the deletion guard.
"""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "kolosal-cli"

# ============================================================================
# File extensions and formats
# ============================================================================

LOG_FILE_EXTENSION = ".log"

DATETIME_FORMAT_FILENAME = "%Y-%m-%d_%H-%M-%S"

# ============================================================================
# Default directories and paths
# ============================================================================

USER_DATA_DIR = "~/.kolosal"
DEFAULT_USER_SETTINGS_FILE = f"{USER_DATA_DIR}/settings.json"
DEFAULT_LOGS_DIR = f"{USER_DATA_DIR}/logs"
REPL_HISTORY_FILE = f"{USER_DATA_DIR}/history"

# ============================================================================
# Settings keys
# ============================================================================

SETTINGS_MODEL_KEY = "model"
SETTINGS_SAVED_MODELS_KEY = "savedModels"
SETTINGS_MODEL_NAME_KEY = "name"

# ============================================================================
# Reserved provider (Kolosal Cloud)
# ============================================================================

# Entries matching any of these are provisioned remotely and never deletable.
KOLOSAL_MODEL_ID_PREFIX = "kolosal-"
KOLOSAL_LABEL_SUFFIX = "(Kolosal Cloud)"
KOLOSAL_API_BASE_URL = "https://api.kolosal.ai/v1"

# ============================================================================
# Display
# ============================================================================

DISPLAY_NONE = "(none)"

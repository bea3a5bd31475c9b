"""Configuration constants for sak, overridable from the environment."""

import os
from typing import Optional

# ============================================================================
# WORKTIME
# ============================================================================

WORKTIME_FILE = os.getenv("SAK_WORKTIME_FILE", "worktime.csv")

# ============================================================================
# DIARY
# ============================================================================

# None means the current working directory
DIARY_DIR: Optional[str] = os.getenv("SAK_DIARY_DIR") or None

DIARY_TIMESTAMP_FORMAT = "%H:%M"

EDITOR_ENV_VAR = "EDITOR"
DEFAULT_EDITOR = "vim"

# ============================================================================
# LOGGING
# ============================================================================

LOG_LEVEL = os.getenv("SAK_LOG_LEVEL", "INFO").upper()

# https://no-color.org
USE_COLORS = "NO_COLOR" not in os.environ

"""Environment driven settings."""

import os

from pydantic import BaseModel, ConfigDict, Field

# Env var that enables debug logging. Its value is the log path.
ENV_NAME_DEBUG = "MCP_TEXT_MIRROR_DEBUG_LOG"
# Set to True to log to a file by default.
FILE_LOG_DEFAULT = False
LOG_NAME = "text-mirror.log"
LOG_DIR = "."


def is_debug_mode() -> bool:
    """Return whether debug logging to a file is enabled.

    Enabled when ``MCP_TEXT_MIRROR_DEBUG_LOG`` is set to a non-empty value,
    otherwise ``FILE_LOG_DEFAULT``.
    """
    if os.getenv(ENV_NAME_DEBUG):
        return True
    return FILE_LOG_DEFAULT


def get_log_path() -> str:
    """Return the path of the debug log file.

    The value of ``MCP_TEXT_MIRROR_DEBUG_LOG`` if set, ``./text-mirror.log``
    otherwise.
    """
    log_path = os.getenv(ENV_NAME_DEBUG) or os.path.join(LOG_DIR, LOG_NAME)
    return os.path.normpath(log_path)


class Settings(BaseModel):
    """Settings read once at startup and handed to the components needing them."""

    model_config = ConfigDict(frozen=True)

    debug_log: bool = Field(
        default=FILE_LOG_DEFAULT, description="Log tool calls to the log file."
    )
    log_path: str = Field(
        default=os.path.join(LOG_DIR, LOG_NAME), description="Path of the log file."
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Read the settings from the environment."""
        return cls(debug_log=is_debug_mode(), log_path=get_log_path())

"""Engine settings and defaults."""

from pathlib import Path

from pydantic import BaseModel, Field


ENV_PREFIX = "SWIFTKIT"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

SUPPORTED_TARGET_FORMATS = ("jpeg", "png", "webp")

# Vector input can only be rasterized to PNG.
SVG_TARGET_FORMATS = ("png",)

MAX_FILENAME_BYTES = 255


class EngineSettings(BaseModel):
    """Tunables shared by every command of one invocation."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Thread pool size for batch execution; None means one worker per operation.",
    )
    recheck_before_rename: bool = Field(
        default=True,
        description="Re-probe each target right before renaming it.",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)
    log_file: Path | None = Field(default=None, description="Optional file that receives debug log lines.")

"""Pipeline configuration with environment variable loading.

Pydantic-based byte windows and character budgets for the recovery pipeline.
Library functions take these values as explicit arguments; only
get_pipeline_config() reads the environment.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load environment variables from .env file
load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to a default."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


class RecoveryWindows(BaseModel):
    """Byte windows bounding the scan cost of each recovery strategy.

    Attributes:
        head_window: Leading bytes scanned by the byte-run strategy.
        tail_window: Trailing bytes scanned by the byte-run strategy.
        encoding_window: Leading bytes decoded by the encoding prober.
        structure_window: Leading bytes scanned for container markers.
    """

    model_config = ConfigDict(frozen=True)

    head_window: int = Field(default=50_000, ge=0)
    tail_window: int = Field(default=20_000, ge=0)
    encoding_window: int = Field(default=100_000, ge=0)
    structure_window: int = Field(default=100_000, ge=0)


class PipelineConfig(BaseModel):
    """Configuration for end-to-end document processing.

    Attributes:
        windows: Byte windows for the recovery strategies.
        text_limit: Character budget for the persisted text.
        excerpt_limit: Character budget for the analysis excerpt.
    """

    model_config = ConfigDict(frozen=True)

    windows: RecoveryWindows = Field(
        default_factory=lambda: RecoveryWindows(
            head_window=_env_int("SALVAGE_HEAD_WINDOW", 50_000),
            tail_window=_env_int("SALVAGE_TAIL_WINDOW", 20_000),
            encoding_window=_env_int("SALVAGE_ENCODING_WINDOW", 100_000),
            structure_window=_env_int("SALVAGE_STRUCTURE_WINDOW", 100_000),
        ),
        description="Byte windows for the recovery strategies",
    )
    text_limit: int = Field(
        default_factory=lambda: _env_int("SALVAGE_TEXT_LIMIT", 10_000),
        ge=1,
        description="Maximum characters kept for the persisted text",
    )
    excerpt_limit: int = Field(
        default_factory=lambda: _env_int("SALVAGE_EXCERPT_LIMIT", 4_000),
        ge=1,
        description="Maximum characters handed to the analysis step",
    )


def get_pipeline_config() -> PipelineConfig:
    """Create pipeline configuration from environment.

    Returns:
        Configured PipelineConfig instance.

    Raises:
        ValueError: If a variable is not an integer.
        pydantic.ValidationError: If a window or budget is out of range.
    """
    return PipelineConfig()

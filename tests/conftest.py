"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - test_data_dir: Path to sample files directory
    - sample_pdf_bytes: Hand-written PDF with uncompressed content streams
    - structure_only_pdf: Buffer whose only text sits in a literal string
    - windows / pipeline_config: Default configuration values
"""

from pathlib import Path

import pytest

from textsalvage.config import PipelineConfig, RecoveryWindows

_ENV_VARS = (
    "SALVAGE_HEAD_WINDOW",
    "SALVAGE_TAIL_WINDOW",
    "SALVAGE_ENCODING_WINDOW",
    "SALVAGE_STRUCTURE_WINDOW",
    "SALVAGE_TEXT_LIMIT",
    "SALVAGE_EXCERPT_LIMIT",
)


@pytest.fixture(autouse=True)
def clean_salvage_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration tests independent of the host environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_data_dir() -> Path:
    """Return path to test data directory.

    Returns:
        Absolute path to tests/data/ directory.
    """
    return Path(__file__).parent / "data"


@pytest.fixture
def sample_pdf_bytes(test_data_dir: Path) -> bytes:
    """Return the bytes of the sample resume PDF."""
    return (test_data_dir / "sample_resume.pdf").read_bytes()


@pytest.fixture
def structure_only_pdf() -> bytes:
    """Build a buffer that only the structure scan can read.

    The literal string sits past the byte-run head window and before the
    tail window, and is too short for the encoding probe.
    """
    return b"0" * 60_000 + b"(Hello World)" + b"0" * 30_000


@pytest.fixture
def windows() -> RecoveryWindows:
    """Return default recovery windows."""
    return RecoveryWindows()


@pytest.fixture
def pipeline_config() -> PipelineConfig:
    """Return pipeline configuration built from defaults."""
    return PipelineConfig()

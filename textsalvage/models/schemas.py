from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecoveryStrategy(str, Enum):
    """Recovery heuristics, in the order the orchestrator tries them."""

    BYTE_RUN = "byte_run"
    ENCODING = "encoding"
    STRUCTURE = "structure"


class RawDocument(BaseModel):
    """An uploaded document as received from the caller.

    Attributes:
        data: Raw file bytes.
        mime_type: Declared MIME type, normalized to a bare lowercase type.
    """

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str = Field(default="application/octet-stream")

    @field_validator("mime_type", mode="before")
    @classmethod
    def normalize_mime_type(cls, v: str) -> str:
        """Drop parameters such as charset and lowercase the type."""
        if isinstance(v, str):
            return v.split(";", 1)[0].strip().lower()
        return v


class RecoveryAttempt(BaseModel):
    """Output of one recovery strategy.

    Attributes:
        strategy: The heuristic that produced the text.
        text: Recovered text, possibly empty.
    """

    model_config = ConfigDict(frozen=True)

    strategy: RecoveryStrategy
    text: str = ""

    @property
    def succeeded(self) -> bool:
        """Return True if the attempt recovered any non-whitespace text."""
        return bool(self.text.strip())


class ProcessedDocument(BaseModel):
    """Final result of running a document through the whole pipeline.

    Attributes:
        text: Sanitized, filtered text bounded by the persisted-text budget.
        excerpt: Shorter excerpt bounded by the analysis budget.
        strategy: Recovery strategy that produced the text, None when the
            bytes were decoded directly.
        extraction_failed: Whether the failure notice was substituted.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    excerpt: str
    strategy: RecoveryStrategy | None = None
    extraction_failed: bool = False

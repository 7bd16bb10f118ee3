"""Pydantic models passed between pipeline stages.

All models are frozen: each stage creates new values and never mutates its input.

Models:
    - RawDocument: uploaded bytes plus declared MIME type
    - RecoveryStrategy: the three recovery heuristics
    - RecoveryAttempt: text produced by one heuristic
    - ProcessedDocument: bounded text and excerpt handed downstream
"""

from textsalvage.models.schemas import (
    ProcessedDocument,
    RawDocument,
    RecoveryAttempt,
    RecoveryStrategy,
)

__all__ = ["ProcessedDocument", "RawDocument", "RecoveryAttempt", "RecoveryStrategy"]

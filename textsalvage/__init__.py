"""textsalvage - best-effort text recovery for damaged and LaTeX-generated documents.

Turns raw uploaded bytes into a clean, bounded excerpt without a full PDF
parser. Recovery heuristics run as a short-circuiting cascade, and the
recovered text is sanitized, filtered for readability, and truncated at a
sentence boundary.

Components:
    - recovery: byte-run, encoding and container-structure strategies plus MIME dispatch
    - cleaning: sanitizer, readability filter and bounded truncator
    - pipeline: configuration and end-to-end document processing
    - models: immutable value types shared by every stage
"""

__version__ = "0.1.0"

"""Unit tests for individual components in isolation.

Coverage:
    - recovery/: byte runs, encoding probe, structure scan, orchestration
    - cleaning/: sanitizer, readability filter, truncation
    - config and models: validation and normalization

No file system access beyond tests/data/. Leverages pytest-check for
multiple assertions per test.
"""

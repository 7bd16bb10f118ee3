"""Integration tests for components working together as a system.

No mocks - documents go through extraction, cleaning and truncation exactly
as callers run them.

Coverage:
    - process_document with sample PDFs, plain text and unreadable buffers
    - Command-line entry point with real files
"""

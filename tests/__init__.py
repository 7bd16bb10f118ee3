"""Test package for textsalvage.

Unit tests cover each recovery strategy and cleaning stage in isolation;
integration tests run whole documents through the pipeline and the CLI.

Structure:
    - unit/: Individual function and model tests
    - integration/: End-to-end pipeline and command-line tests
    - data/: Sample documents

Leverages pytest with pytest-check for soft assertions.
"""

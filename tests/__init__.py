"""
Test suite for the pynoisy package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for colors, configuration, noise kernels and the CLI
- Integration tests for complete generate-and-save workflows

Run with: pytest
"""

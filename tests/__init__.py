"""Test package for elogging.

Contains unit tests for the level model, line writer, registry, repeat
suppression, scoped loggers, global controls and configuration, plus
BDD-style feature tests for end-to-end scenarios.

Test Organisation
-----------------
- Unit tests (test_*.py): Test individual components such as the writer,
  registry and configuration helpers.
- BDD tests (features/): Gherkin feature files with step definitions in
  steps/.
- Shared fixtures (conftest.py): pytest fixtures including
  `logger_factory` for buffered loggers and `_clean_logging_context` for
  automatic context reset.
- Shared helpers (helpers.py): Common test utilities such as
  `buffer_lines` for reading captured output.

Running Tests
-------------
Run all tests::

    pytest

Run BDD tests only::

    pytest tests/steps/

Run a specific test file::

    pytest tests/test_repeat_suppression.py
"""

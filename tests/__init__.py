"""TimeKeeper Test Suite.

Test organization mirrors src/ structure:
    tests/
    ├── conftest.py          # Shared fixtures
    ├── test_core/           # Config, logging, exceptions
    ├── test_models/         # Form snapshots
    ├── test_engine/         # Biorhythm and chart logic
    └── test_integrations/   # Workbook reading
"""

"""
Root conftest.py for the skill exchange project.

Puts the service directory on sys.path so its ``app`` package imports
without an editable install.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """Add each service directory under services/ to sys.path."""
    root_dir = Path(__file__).parent

    for service_path in sorted((root_dir / "services").iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))

"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application runs out of the box against a ``data`` directory next to
the package.  Override them via environment variables or by passing a
``Settings`` instance to ``create_app``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Home Booking")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Directory holding the JSON collections and the catalog document.
    # A relative path is resolved against the project root by
    # ``resolve_data_path``.
    data_dir: str = os.getenv("DATA_DIR", "data")

    customers_file: str = os.getenv("CUSTOMERS_FILE", "customers.json")
    services_file: str = os.getenv("SERVICES_FILE", "services.json")
    payments_file: str = os.getenv("PAYMENTS_FILE", "payments.json")
    catalog_file: str = os.getenv("CATALOG_FILE", "works_config.json")

    def resolve_data_path(self, filename: str) -> str:
        """Return the absolute path of ``filename`` inside ``data_dir``."""
        data_dir = Path(self.data_dir)
        if not data_dir.is_absolute():
            base_dir = Path(__file__).resolve().parent.parent.parent.parent
            data_dir = base_dir / data_dir
        return str((data_dir / filename).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

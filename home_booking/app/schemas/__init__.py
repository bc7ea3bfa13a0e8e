"""
Pydantic schema definitions for the stored entities.

Models accept both the camelCase keys used on disk and the snake_case
attribute names.  Each persisted model exposes ``to_record`` returning
the exact dictionary written to storage.
"""

from .catalog import CatalogDocument, Package, Work  # noqa: F401
from .customer import Customer  # noqa: F401
from .payment import Payment  # noqa: F401
from .service import GenderPreference, Service, ServiceStatus, ServiceType  # noqa: F401

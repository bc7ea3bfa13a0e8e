"""
Persistence layer.

``base`` declares the repository contracts; ``memory`` and
``json_file`` implement them.  ``work_configuration`` holds the
read-only work catalog.
"""

from .base import CustomerRepository, PaymentRepository, ServiceRepository  # noqa: F401
from .json_file import JsonCustomerRepository, JsonPaymentRepository, JsonServiceRepository  # noqa: F401
from .memory import InMemoryCustomerRepository, InMemoryPaymentRepository, InMemoryServiceRepository  # noqa: F401
from .work_configuration import WorkConfiguration  # noqa: F401

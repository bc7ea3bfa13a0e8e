"""
Main entrypoint for the booking core.

``create_app`` wires the JSON repositories, the work catalog and the
services into a single ``BookingApp`` container.  The console layer
(or the command line in ``cli``) builds one container per process and
calls the services through it::

    app = create_app()
    service = app.booking_service.create_immediate(...)

File locations and logging come from ``Settings`` in ``core.config``.
"""

from dataclasses import dataclass
from typing import Optional

from .core.clock import Clock, SystemClock
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .repositories.base import CustomerRepository, PaymentRepository, ServiceRepository
from .repositories.json_file import JsonCustomerRepository, JsonPaymentRepository, JsonServiceRepository
from .repositories.work_configuration import WorkConfiguration
from .services.booking_service import BookingService
from .services.customer_service import CustomerService
from .services.payment_service import PaymentService
from .services.validation import BookingRequestValidator


@dataclass
class BookingApp:
    """Repositories and services sharing one set of storage files."""

    customer_repo: CustomerRepository
    service_repo: ServiceRepository
    payment_repo: PaymentRepository
    catalog: WorkConfiguration
    customer_service: CustomerService
    booking_service: BookingService
    payment_service: PaymentService
    validator: BookingRequestValidator


def build_app(
    customer_repo: CustomerRepository,
    service_repo: ServiceRepository,
    payment_repo: PaymentRepository,
    catalog: WorkConfiguration,
    clock: Optional[Clock] = None,
) -> BookingApp:
    """Assemble the services over already constructed repositories."""
    clock = clock or SystemClock()
    return BookingApp(
        customer_repo=customer_repo,
        service_repo=service_repo,
        payment_repo=payment_repo,
        catalog=catalog,
        customer_service=CustomerService(customer_repo, service_repo),
        booking_service=BookingService(service_repo, clock),
        payment_service=PaymentService(payment_repo, catalog),
        validator=BookingRequestValidator(catalog, clock),
    )


def create_app(config: Optional[Settings] = None, clock: Optional[Clock] = None) -> BookingApp:
    """Create a ``BookingApp`` backed by the JSON files named in ``config``.

    Logging is configured first so that catalog loading can report a
    fallback to the built-in works.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file)
    return build_app(
        JsonCustomerRepository(config.resolve_data_path(config.customers_file)),
        JsonServiceRepository(config.resolve_data_path(config.services_file)),
        JsonPaymentRepository(config.resolve_data_path(config.payments_file)),
        WorkConfiguration(config.resolve_data_path(config.catalog_file)),
        clock=clock,
    )

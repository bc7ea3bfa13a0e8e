"""
Business logic for customers.

Registration, authentication, profile updates and booking lookup.
Passwords are compared in plain text; the storage format is shared
with the worker/admin subsystem and cannot carry hashes.
"""

import logging
from typing import List, Optional

from ..repositories.base import CustomerRepository, ServiceRepository
from ..schemas.customer import Customer
from ..schemas.service import Service, ServiceStatus


class CustomerService:
    """Service for working with customers and their bookings."""

    def __init__(self, customer_repo: CustomerRepository, service_repo: ServiceRepository) -> None:
        self.customer_repo = customer_repo
        self.service_repo = service_repo

    def register_customer(self, customer: Customer) -> bool:
        """Store a new customer.

        Returns ``False`` without writing anything if the id is taken,
        and ``False`` when the record could not be stored.
        """
        logger = logging.getLogger(__name__)
        if self.customer_repo.exists(customer.id):
            logger.info("Registration refused: customer id %s already exists", customer.id)
            return False
        if not self.customer_repo.save(customer):
            logger.warning("Customer %s could not be stored", customer.id)
            return False
        logger.info("Registered customer %s", customer.id)
        return True

    def id_exists(self, customer_id: str) -> bool:
        return self.customer_repo.exists(customer_id)

    def update_customer(self, customer: Customer) -> bool:
        """Overwrite the stored profile with ``customer``."""
        return self.customer_repo.save(customer)

    def authenticate(self, customer_id: str, password: str) -> Optional[Customer]:
        """Return the customer only if both id and password match exactly."""
        customer = self.customer_repo.find_by_id(customer_id)
        if customer is None or customer.password != password:
            return None
        return customer

    def view_customer_bookings(self, customer_id: str) -> List[Service]:
        return self.service_repo.find_by_customer(customer_id)

    def current_bookings(self, customer_id: str) -> List[Service]:
        """Pending and assigned services."""
        return self._bookings_with_status(customer_id, ServiceStatus.PENDING, ServiceStatus.ASSIGNED)

    def completed_bookings(self, customer_id: str) -> List[Service]:
        return self._bookings_with_status(customer_id, ServiceStatus.COMPLETED)

    def rejected_bookings(self, customer_id: str) -> List[Service]:
        return self._bookings_with_status(customer_id, ServiceStatus.REJECTED)

    def _bookings_with_status(self, customer_id: str, *statuses: ServiceStatus) -> List[Service]:
        wanted = {s.value for s in statuses}
        return [s for s in self.view_customer_bookings(customer_id) if s.status in wanted]

"""
Business logic for bookings.

The ``BookingService`` creates service requests (immediate or
scheduled), attaches the paid price to a stored request and rebooks
completed requests.  It trusts its arguments: selection counts,
duplicate works and future scheduling are checked by the caller (see
``BookingRequestValidator``) before anything is created here.

Status and work-assignment fields belong to the worker/admin
subsystem.  Every save performed by this service writes those fields
back exactly as they were stored.
"""

import logging
from typing import List, Optional

from ..core.clock import Clock, SystemClock, current_date, current_time
from ..repositories.base import ServiceRepository
from ..schemas.customer import Customer
from ..schemas.service import Service, ServiceStatus, ServiceType


class BookingService:
    """Service for creating and updating service requests."""

    def __init__(self, service_repo: ServiceRepository, clock: Optional[Clock] = None) -> None:
        self.service_repo = service_repo
        self.clock = clock or SystemClock()

    def _new_service(
        self,
        service_type: ServiceType,
        plan: str,
        locality: str,
        customer_id: str,
        customer_gender: str,
        address: str,
        requested_services: List[str],
        gender_pref: str,
    ) -> Service:
        return Service(
            id=self.service_repo.next_id(),
            status=ServiceStatus.PENDING.value,
            type=service_type,
            plan=plan,
            booking_date=current_date(self.clock),
            booking_time=current_time(self.clock),
            locality=locality,
            customer_id=customer_id,
            customer_gender=customer_gender,
            address=address,
            requested_services=list(requested_services),
            gender_pref=gender_pref,
        )

    def create_immediate(
        self,
        plan: str,
        locality: str,
        customer_id: str,
        customer_gender: str,
        address: str,
        requested_services: List[str],
        gender_pref: str,
    ) -> Service:
        """Create and persist a Pending request to be served right away."""
        logger = logging.getLogger(__name__)
        service = self._new_service(
            ServiceType.IMMEDIATE, plan, locality, customer_id, customer_gender,
            address, requested_services, gender_pref,
        )
        self.service_repo.save(service)
        logger.info("Created immediate service %s for customer %s (%s plan)", service.id, customer_id, plan)
        return service

    def create_scheduling(
        self,
        plan: str,
        locality: str,
        customer_id: str,
        customer_gender: str,
        address: str,
        requested_services: List[str],
        gender_pref: str,
        scheduled_date: str,
        scheduled_time: str,
    ) -> Service:
        """Create and persist a Pending request for a given date and time.

        The scheduled moment is stored as the work date and start time.
        """
        logger = logging.getLogger(__name__)
        service = self._new_service(
            ServiceType.SCHEDULING, plan, locality, customer_id, customer_gender,
            address, requested_services, gender_pref,
        )
        service.work_date = scheduled_date
        service.work_start_time = scheduled_time
        self.service_repo.save(service)
        logger.info(
            "Created scheduled service %s for customer %s at %s %s",
            service.id, customer_id, scheduled_date, scheduled_time,
        )
        return service

    def attach_price(self, service_id: int, price: float) -> Optional[Service]:
        """Record the paid ``price`` on a stored service.

        The latest stored record is re-read so that fields written by the
        worker/admin subsystem since the service was created are kept.
        Returns the updated service, or ``None`` if it does not exist.
        """
        stored = self.service_repo.find_by_id(service_id)
        if stored is None:
            logging.getLogger(__name__).warning("Cannot attach price: service %s not found", service_id)
            return None
        stored.price = price
        self.service_repo.save(stored)
        return stored

    def rebook(
        self,
        previous: Service,
        customer: Customer,
        scheduled_date: Optional[str] = None,
        scheduled_time: Optional[str] = None,
    ) -> Service:
        """Create a new Pending request repeating ``previous``.

        Plan, requested works and gender preference are copied; locality,
        gender and address come from the customer's current profile.  A
        scheduled request is created when both date and time are given,
        otherwise an immediate one.
        """
        args = (
            previous.plan, customer.locality, customer.id, customer.gender,
            customer.address, previous.requested_services, previous.gender_pref,
        )
        if scheduled_date and scheduled_time:
            return self.create_scheduling(*args, scheduled_date, scheduled_time)
        return self.create_immediate(*args)

"""
Business logic for payments.

Payment here is a local confirmation step: a bill is generated from
the catalog and the service's plan, and the customer confirms it by
entering the amount.  The amount must match the bill exactly; there is
no tolerance, not even for floating point rounding of discounted
totals.
"""

import logging
from typing import Iterable, Optional, TYPE_CHECKING

from ..repositories.base import PaymentRepository
from ..repositories.work_configuration import WorkConfiguration
from ..schemas.payment import Payment
from ..schemas.service import Service
from .pricing import PricingPlan, calculate_price

if TYPE_CHECKING:
    from .booking_service import BookingService


class PaymentService:
    """Service for generating and reconciling payments."""

    def __init__(self, payment_repo: PaymentRepository, catalog: WorkConfiguration) -> None:
        self.payment_repo = payment_repo
        self.catalog = catalog

    def calculate_bill(self, service: Service, work_ids: Iterable[int]) -> float:
        logger = logging.getLogger(__name__)
        plan = PricingPlan.from_name(service.plan)
        if plan is PricingPlan.UNKNOWN:
            logger.warning("Unknown plan %r on service %s; charging full price", service.plan, service.id)
        return calculate_price(plan, work_ids, self.catalog)

    def generate_payment(self, service: Service, work_ids: Iterable[int]) -> Payment:
        """Create the unpaid bill for ``service``.

        Any earlier payment stored for the same service is replaced.
        """
        logger = logging.getLogger(__name__)
        payment = Payment(
            service_id=service.id,
            amount_due=self.calculate_bill(service, list(work_ids)),
            paid=False,
        )
        self.payment_repo.save(payment)
        logger.info("Generated payment of %.2f for service %s", payment.amount_due, service.id)
        return payment

    def process_payment(self, service_id: int, amount: float) -> bool:
        """Confirm the payment for ``service_id`` with ``amount``.

        Returns ``True`` and marks the payment paid only when ``amount``
        equals the stored amount due.  Returns ``False`` without
        touching storage when no payment exists or the amount differs.
        """
        logger = logging.getLogger(__name__)
        payment = self.payment_repo.find_by_service(service_id)
        if payment is None:
            logger.info("No payment found for service %s", service_id)
            return False
        if amount != payment.amount_due:
            logger.info(
                "Payment for service %s rejected: got %s, expected %s",
                service_id, amount, payment.amount_due,
            )
            return False
        payment.paid = True
        self.payment_repo.save(payment)
        logger.info("Payment for service %s confirmed", service_id)
        return True

    def get_payment(self, service_id: int) -> Optional[Payment]:
        return self.payment_repo.find_by_service(service_id)

    def settle(self, service: Service, amount: float, booking_service: "BookingService") -> bool:
        """Process the payment and, on success, store the price on the service."""
        if not self.process_payment(service.id, amount):
            return False
        payment = self.get_payment(service.id)
        if payment is not None:
            booking_service.attach_price(service.id, payment.amount_due)
        return True

"""
Service layer.

Each service encapsulates business logic for one concern and receives
its repositories in the constructor, so the same logic runs against
the JSON files or the in-memory test doubles.
"""

from .booking_service import BookingService  # noqa: F401
from .customer_service import CustomerService  # noqa: F401
from .payment_service import PaymentService  # noqa: F401
from .pricing import PricingPlan, calculate_price  # noqa: F401
from .validation import BookingRequestValidator, Selection  # noqa: F401

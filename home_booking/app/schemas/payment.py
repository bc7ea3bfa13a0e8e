"""
Pydantic model for payments.

One payment exists per service.  ``amount_due`` is computed from the
catalog and the service's plan when the payment is generated; ``paid``
only ever moves from ``False`` to ``True``.
"""

from pydantic import BaseModel, Field


class Payment(BaseModel):
    service_id: int = Field(..., alias="serviceID")
    amount_due: float = Field(..., alias="amountDue", examples=[990.0])
    paid: bool = False

    model_config = {
        "populate_by_name": True,
    }

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

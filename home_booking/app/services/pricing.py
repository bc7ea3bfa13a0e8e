"""
Plan-based pricing.

A service's ``plan`` string selects one of the ``PricingPlan`` tiers.
Each tier applies a fixed multiplier to the catalog total of the
selected works and also defines how many works a customer picks under
it.  Plan names are matched case-sensitively; anything unrecognised
maps to ``PricingPlan.UNKNOWN``, which charges the undiscounted total.
"""

from enum import Enum
from typing import Iterable, Optional

from ..repositories.work_configuration import WorkConfiguration


class PricingPlan(Enum):
    BASIC = ("Basic", 1.0, 1, False)
    INTERMEDIATE = ("Intermediate", 0.90, 3, False)
    PREMIUM = ("Premium", 0.80, 5, True)
    UNKNOWN = ("", 1.0, 0, False)

    def __init__(self, label: str, multiplier: float, selection_count: int, allows_package: bool) -> None:
        self.label = label
        self.multiplier = multiplier
        # Number of individual works to select; 0 means no selection is valid.
        self.selection_count = selection_count
        self.allows_package = allows_package

    @classmethod
    def from_name(cls, name: Optional[str]) -> "PricingPlan":
        for plan in (cls.BASIC, cls.INTERMEDIATE, cls.PREMIUM):
            if plan.label == name:
                return plan
        return cls.UNKNOWN

    @property
    def is_discounted(self) -> bool:
        return self.multiplier != 1.0


def calculate_price(plan: PricingPlan, work_ids: Iterable[int], catalog: WorkConfiguration) -> float:
    """Return the amount due for ``work_ids`` under ``plan``.

    Basic and unknown plans return the catalog total unchanged;
    Intermediate takes 10% off and Premium 20% off.
    """
    total = catalog.get_total_price_by_ids(work_ids)
    if not plan.is_discounted:
        return total
    return total * plan.multiplier

"""
Checks applied to a booking request before it is created.

The console layer collects a plan, a set of work ids (or a package for
Premium) and, for scheduled requests, a date and time.  The helpers here
turn those raw choices into a ``Selection`` that can be handed to
``BookingService`` and ``PaymentService``, or report that the choice is
invalid.  Nothing here raises for bad input: an invalid selection is
empty and falsy, an invalid schedule is ``False``.

Rules per plan:

* Basic: exactly 1 work.
* Intermediate: exactly 3 distinct works.
* Premium: exactly 5 distinct works, or one package.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..core.clock import Clock, SystemClock, is_future, is_valid_date, is_valid_time
from ..repositories.work_configuration import WorkConfiguration
from .pricing import PricingPlan


@dataclass
class Selection:
    """Resolved works for a booking: names to store, ids to price."""

    names: List[str] = field(default_factory=list)
    work_ids: List[int] = field(default_factory=list)
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return bool(self.work_ids) and self.error is None

    @classmethod
    def invalid(cls, reason: str) -> "Selection":
        logger = logging.getLogger(__name__)
        logger.debug("Selection rejected: %s", reason)
        return cls(error=reason)


class BookingRequestValidator:
    def __init__(self, catalog: WorkConfiguration, clock: Optional[Clock] = None) -> None:
        self.catalog = catalog
        self.clock = clock or SystemClock()

    def select_works(self, plan: PricingPlan, work_ids: Iterable[int]) -> Selection:
        ids = list(work_ids)
        if plan is PricingPlan.UNKNOWN:
            return Selection.invalid("unknown plan")
        if len(ids) != plan.selection_count:
            return Selection.invalid(f"{plan.label} plan requires {plan.selection_count} work(s), got {len(ids)}")
        names = []
        seen = set()
        for work_id in ids:
            work = self.catalog.get_work_by_id(work_id)
            if work is None:
                return Selection.invalid(f"unknown work id {work_id}")
            if work_id in seen:
                return Selection.invalid(f"duplicate work id {work_id}")
            seen.add(work_id)
            names.append(work.name)
        return Selection(names=names, work_ids=ids)

    def select_package(self, plan: PricingPlan, package_id: int) -> Selection:
        if not plan.allows_package:
            return Selection.invalid(f"packages are not available on the {plan.label or 'unknown'} plan")
        package = self.catalog.get_package_by_id(package_id)
        if package is None:
            return Selection.invalid(f"unknown package id {package_id}")
        ids = list(package.work_ids)
        # Package members missing from the catalog are dropped, as the
        # name lookup skips them too.
        known = [i for i in ids if self.catalog.get_work_by_id(i) is not None]
        if not known:
            return Selection.invalid(f"package {package_id} has no known works")
        return Selection(names=self.catalog.get_work_names_by_ids(known), work_ids=known)

    def validate_schedule(self, date: str, time: str) -> bool:
        """Check formats and that the moment is strictly in the future."""
        if not is_valid_date(date) or not is_valid_time(time):
            return False
        return is_future(date, time, self.clock)

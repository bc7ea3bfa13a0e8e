"""
Work catalog.

``WorkConfiguration`` loads the bookable works and packages from a JSON
document of the form ``{"works": [...], "packages": [...]}`` once, when
it is constructed.  If the document is missing or cannot be parsed the
built-in catalog below is used instead, so the application always has
something to offer.  Later edits to the file are not picked up until a
new instance is created.

Lookups never raise: unknown ids are skipped by the list helpers and
contribute nothing to price totals.
"""

import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from ..core.storage import load_json_document
from ..schemas.catalog import CatalogDocument, Package, Work


logger = logging.getLogger(__name__)


DEFAULT_WORKS: List[Work] = [
    Work(id=1, name="Window Cleaning", category="house", time_minutes=80, price=600),
    Work(id=2, name="Mopping", category="house", time_minutes=40, price=300),
    Work(id=3, name="Sweeping", category="house", time_minutes=30, price=200),
    Work(id=4, name="Fan Cleaning", category="house", time_minutes=40, price=400),
    Work(id=5, name="Bathroom Cleaning", category="house", time_minutes=60, price=500),
    Work(id=6, name="Mowing", category="garden", time_minutes=80, price=700),
    Work(id=7, name="Pruning", category="garden", time_minutes=120, price=900),
    Work(id=8, name="Washing", category="laundry", time_minutes=40, price=300),
    Work(id=9, name="Drying", category="laundry", time_minutes=30, price=200),
    Work(id=10, name="Ironing", category="laundry", time_minutes=40, price=200),
]

DEFAULT_PACKAGES: List[Package] = [
    Package(id=1, name="House Cleaning", description="Complete house cleaning", work_ids=[1, 2, 3, 4, 5]),
    Package(id=2, name="Garden Cleaning", description="Garden maintenance", work_ids=[6, 7]),
    Package(id=3, name="Laundry", description="Complete laundry services", work_ids=[8, 9, 10]),
]


class WorkConfiguration:
    """Catalog of works and packages loaded from ``path``."""

    def __init__(self, path: Optional[str] = "works_config.json") -> None:
        self.path = path
        self.works: List[Work] = []
        self.packages: List[Package] = []
        self.using_defaults = False
        self._load()

    def _load(self) -> None:
        document = load_json_document(self.path) if self.path else None
        if document is None:
            logger.warning("Catalog %s not found or unreadable; using built-in defaults", self.path)
            self._load_defaults()
            return
        try:
            catalog = CatalogDocument.model_validate(document)
        except ValidationError as exc:
            logger.warning("Catalog %s is invalid (%s); using built-in defaults", self.path, exc.error_count())
            self._load_defaults()
            return
        # A document may legitimately define only one of the two lists.
        self.works = catalog.works
        self.packages = catalog.packages
        logger.info("Loaded %d works and %d packages from %s", len(self.works), len(self.packages), self.path)

    def _load_defaults(self) -> None:
        self.works = [w.model_copy() for w in DEFAULT_WORKS]
        self.packages = [p.model_copy(deep=True) for p in DEFAULT_PACKAGES]
        self.using_defaults = True

    def get_work_by_id(self, work_id: int) -> Optional[Work]:
        for work in self.works:
            if work.id == work_id:
                return work
        return None

    def get_package_by_id(self, package_id: int) -> Optional[Package]:
        for package in self.packages:
            if package.id == package_id:
                return package
        return None

    def get_work_names_by_ids(self, ids: Iterable[int]) -> List[str]:
        """Return the names of the known works among ``ids``, in order."""
        names = []
        for work_id in ids:
            work = self.get_work_by_id(work_id)
            if work is not None:
                names.append(work.name)
        return names

    def get_ids_by_names(self, names: Iterable[str]) -> List[int]:
        """Map work names to ids.

        Matching is exact and case-sensitive; the first work with a
        given name wins and unmatched names are skipped.
        """
        ids = []
        for name in names:
            for work in self.works:
                if work.name == name:
                    ids.append(work.id)
                    break
        return ids

    def get_total_price_by_ids(self, ids: Iterable[int]) -> float:
        """Sum the unit prices of the known works among ``ids``."""
        total = 0.0
        for work_id in ids:
            work = self.get_work_by_id(work_id)
            if work is not None:
                total += work.price
        return total

"""
Repository contracts.

Each collection (customers, services, payments) is persisted as a
whole.  Every implementation must follow the same rules:

* ``save`` is an upsert keyed on the record's identifier: the full
  collection is scanned, a matching record is replaced in place (its
  position is preserved), otherwise the record is appended.  The whole
  collection is then persisted in one write.  There are no partial
  writes, no locks and no version checks; concurrent writers race and
  the last one wins.
* Reads never fail.  Missing or unreadable storage is an empty
  collection, and records that cannot be parsed are skipped.
* Absence is reported as ``None`` or an empty list, never an
  exception.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..schemas.customer import Customer
from ..schemas.payment import Payment
from ..schemas.service import Service


logger = logging.getLogger(__name__)

Record = Dict[str, Any]
ModelT = TypeVar("ModelT", bound=BaseModel)


def upsert_record(records: List[Record], key: str, record: Record) -> List[Record]:
    """Replace the first record whose ``key`` matches, else append.

    ``records`` is modified in place and returned.
    """
    for index, existing in enumerate(records):
        if existing.get(key) == record[key]:
            records[index] = record
            return records
    records.append(record)
    return records


def parse_record(model: Type[ModelT], record: Record) -> Optional[ModelT]:
    """Validate a stored record, returning ``None`` if it is malformed."""
    try:
        return model.model_validate(record)
    except ValidationError as exc:
        logger.warning("Skipping malformed %s record: %s", model.__name__, exc.errors(include_url=False))
        return None


def next_record_id(records: List[Record], key: str = "id") -> int:
    """Return ``max(ids) + 1`` over integer ids, or 1 for an empty collection."""
    ids = [r[key] for r in records if isinstance(r.get(key), int) and not isinstance(r.get(key), bool)]
    return max(ids, default=0) + 1


class CustomerRepository(ABC):
    """Customers keyed by ``id``."""

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        ...

    @abstractmethod
    def save(self, customer: Customer) -> bool:
        """Upsert ``customer`` and persist the whole collection."""

    def exists(self, customer_id: str) -> bool:
        return self.find_by_id(customer_id) is not None


class ServiceRepository(ABC):
    """Service requests keyed by ``id``."""

    @abstractmethod
    def next_id(self) -> int:
        """Return ``max(existing ids) + 1``, or 1 when the collection is empty."""

    @abstractmethod
    def save(self, service: Service) -> bool:
        """Upsert ``service`` and persist the whole collection."""

    @abstractmethod
    def find_by_customer(self, customer_id: str) -> List[Service]:
        """Return the customer's services in stored order."""

    @abstractmethod
    def find_by_id(self, service_id: int) -> Optional[Service]:
        ...


class PaymentRepository(ABC):
    """Payments keyed by ``serviceID``; at most one per service."""

    @abstractmethod
    def save(self, payment: Payment) -> bool:
        """Upsert ``payment`` and persist the whole collection."""

    @abstractmethod
    def find_by_service(self, service_id: int) -> Optional[Payment]:
        ...

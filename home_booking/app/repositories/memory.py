"""
In-memory repositories.

These keep each collection as a list of plain records, exactly the
shape the JSON repositories write to disk, and follow the same upsert
and lookup rules.  They are used as test doubles and for throwaway
sessions where nothing should touch the filesystem.
"""

import copy
from typing import List, Optional

from ..schemas.customer import Customer
from ..schemas.payment import Payment
from ..schemas.service import Service
from .base import (
    CustomerRepository,
    PaymentRepository,
    Record,
    ServiceRepository,
    next_record_id,
    parse_record,
    upsert_record,
)


class InMemoryCustomerRepository(CustomerRepository):
    def __init__(self, records: Optional[List[Record]] = None) -> None:
        self.records: List[Record] = copy.deepcopy(records) if records else []

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        for record in self.records:
            if record.get("id") == customer_id:
                return parse_record(Customer, record)
        return None

    def save(self, customer: Customer) -> bool:
        upsert_record(self.records, "id", copy.deepcopy(customer.to_record()))
        return True


class InMemoryServiceRepository(ServiceRepository):
    def __init__(self, records: Optional[List[Record]] = None) -> None:
        self.records: List[Record] = copy.deepcopy(records) if records else []

    def next_id(self) -> int:
        return next_record_id(self.records)

    def save(self, service: Service) -> bool:
        upsert_record(self.records, "id", copy.deepcopy(service.to_record()))
        return True

    def find_by_customer(self, customer_id: str) -> List[Service]:
        services = []
        for record in self.records:
            if record.get("customerID") == customer_id:
                service = parse_record(Service, copy.deepcopy(record))
                if service is not None:
                    services.append(service)
        return services

    def find_by_id(self, service_id: int) -> Optional[Service]:
        for record in self.records:
            if record.get("id") == service_id:
                return parse_record(Service, copy.deepcopy(record))
        return None


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self, records: Optional[List[Record]] = None) -> None:
        self.records: List[Record] = copy.deepcopy(records) if records else []

    def save(self, payment: Payment) -> bool:
        upsert_record(self.records, "serviceID", payment.to_record())
        return True

    def find_by_service(self, service_id: int) -> Optional[Payment]:
        for record in self.records:
            if record.get("serviceID") == service_id:
                return parse_record(Payment, record)
        return None

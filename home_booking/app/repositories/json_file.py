"""
JSON file repositories.

Each repository owns one file holding an array of records.  Every call
reads the whole file; every ``save`` reads it, upserts one record and
rewrites the whole file.  The file is created as an empty array when
the repository is constructed.  A corrupt file reads as an empty
collection (a warning is logged), so the next save overwrites it.
"""

import logging
from typing import List, Optional

from ..core.storage import ensure_file_exists, load_json_array, write_json_array
from ..schemas.customer import Customer
from ..schemas.payment import Payment
from ..schemas.service import Service
from .base import (
    CustomerRepository,
    PaymentRepository,
    ServiceRepository,
    next_record_id,
    parse_record,
    upsert_record,
)


logger = logging.getLogger(__name__)


class JsonCustomerRepository(CustomerRepository):
    def __init__(self, path: str = "customers.json") -> None:
        self.path = path
        ensure_file_exists(self.path)

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        for record in load_json_array(self.path):
            if record.get("id") == customer_id:
                return parse_record(Customer, record)
        return None

    def save(self, customer: Customer) -> bool:
        records = upsert_record(load_json_array(self.path), "id", customer.to_record())
        return write_json_array(self.path, records)


class JsonServiceRepository(ServiceRepository):
    def __init__(self, path: str = "services.json") -> None:
        self.path = path
        ensure_file_exists(self.path)

    def next_id(self) -> int:
        return next_record_id(load_json_array(self.path))

    def save(self, service: Service) -> bool:
        records = upsert_record(load_json_array(self.path), "id", service.to_record())
        saved = write_json_array(self.path, records)
        if saved:
            logger.debug("Service %s saved to %s", service.id, self.path)
        return saved

    def find_by_customer(self, customer_id: str) -> List[Service]:
        services = []
        for record in load_json_array(self.path):
            if record.get("customerID") != customer_id:
                continue
            service = parse_record(Service, record)
            if service is not None:
                services.append(service)
        return services

    def find_by_id(self, service_id: int) -> Optional[Service]:
        for record in load_json_array(self.path):
            if record.get("id") == service_id:
                return parse_record(Service, record)
        return None


class JsonPaymentRepository(PaymentRepository):
    def __init__(self, path: str = "payments.json") -> None:
        self.path = path
        ensure_file_exists(self.path)

    def save(self, payment: Payment) -> bool:
        records = upsert_record(load_json_array(self.path), "serviceID", payment.to_record())
        return write_json_array(self.path, records)

    def find_by_service(self, service_id: int) -> Optional[Payment]:
        for record in load_json_array(self.path):
            if record.get("serviceID") == service_id:
                return parse_record(Payment, record)
        return None

"""
Pydantic models for service requests.

A ``Service`` is one booking: a bundle of catalog works requested by a
customer under a pricing plan.  The core creates services in the
Pending state; the worker/admin subsystem later writes the status and
the work-assignment fields through the same storage.  Keys this model
does not declare are kept as extra attributes and written back
untouched, so a save performed here never drops data written by that
subsystem.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class ServiceStatus(IntEnum):
    REJECTED = -1
    PENDING = 0
    ASSIGNED = 1
    COMPLETED = 2


class ServiceType(str, Enum):
    IMMEDIATE = "Immediate"
    SCHEDULING = "Scheduling"


class GenderPreference(str, Enum):
    NO_PREFERENCE = "NP"
    MALE = "M"
    FEMALE = "F"


class Service(BaseModel):
    id: int
    # Stored as a plain int: values outside ``ServiceStatus`` written by
    # the external subsystem must survive a round trip.
    status: int = ServiceStatus.PENDING.value
    type: ServiceType = ServiceType.IMMEDIATE
    plan: str
    booking_date: str = Field(..., alias="bookingDate", examples=["2025-09-01"])
    booking_time: str = Field(..., alias="bookingTime", examples=["10:30:00"])
    locality: str
    customer_id: str = Field(..., alias="customerID")
    customer_gender: str = Field(..., alias="customerGender")
    address: str
    requested_services: List[str] = Field(default_factory=list, alias="requestedServices")
    gender_pref: str = Field(GenderPreference.NO_PREFERENCE.value, alias="genderPref")

    # Written by the worker/admin subsystem only.
    work_date: Optional[str] = Field(None, alias="workDate")
    work_start_time: Optional[str] = Field(None, alias="workStartTime")
    work_end_time: Optional[str] = Field(None, alias="workEndTime")
    assigned_worker_ids: Optional[Union[str, List[str]]] = Field(None, alias="assignedWorkerIDs")
    reason: Optional[str] = None

    # Set once the payment for this service succeeds.
    price: Optional[float] = None

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, v: Any) -> Any:
        # Older records store the type as its ordinal.
        if v == 0 and not isinstance(v, bool):
            return ServiceType.IMMEDIATE
        if v == 1 and not isinstance(v, bool):
            return ServiceType.SCHEDULING
        return v

    @property
    def status_label(self) -> str:
        try:
            return ServiceStatus(self.status).name.capitalize()
        except ValueError:
            return "Unknown"

    def to_record(self) -> Dict[str, Any]:
        """Serialise to the stored JSON shape.

        Declared optional fields are omitted when unset.  Extra keys are
        copied verbatim, including null values.
        """
        record = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            include=set(type(self).model_fields),
        )
        record.update(self.model_extra or {})
        return record

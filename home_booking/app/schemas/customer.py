"""
Pydantic model for customers.

Passwords are stored and compared in plain text; the stored JSON
layout is shared with the worker/admin subsystem and keeps that shape.
"""

from pydantic import BaseModel, Field


class Customer(BaseModel):
    id: str = Field(..., examples=["cust001"])
    password: str
    name: str = Field(..., examples=["Ravi Kumar"])
    gender: str = Field(..., examples=["M"])
    locality: str = Field(..., examples=["Benz Circle"])
    address: str

    def to_record(self) -> dict:
        return self.model_dump(mode="json")

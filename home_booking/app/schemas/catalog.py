"""
Pydantic models for the work catalog.

``Work`` is a single bookable job with its unit price; ``Package`` is a
named bundle of work ids.  ``CatalogDocument`` mirrors the on-disk
``works_config.json`` layout.
"""

from typing import List

from pydantic import BaseModel, Field


class Work(BaseModel):
    id: int
    name: str = Field(..., examples=["Window Cleaning"])
    category: str = Field(..., examples=["house"])
    time_minutes: int = Field(..., alias="timeMinutes", examples=[80])
    price: float = Field(..., examples=[600])

    model_config = {
        "populate_by_name": True,
    }


class Package(BaseModel):
    id: int
    name: str = Field(..., examples=["House Cleaning"])
    description: str = ""
    work_ids: List[int] = Field(default_factory=list, alias="workIds")

    model_config = {
        "populate_by_name": True,
    }


class CatalogDocument(BaseModel):
    works: List[Work] = Field(default_factory=list)
    packages: List[Package] = Field(default_factory=list)

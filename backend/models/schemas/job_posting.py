"""Job posting fields used by matching and expiry checks."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_validator

from models.schemas.account_state import as_utc

JobStatus = Literal["active", "expired", "draft", "paused"]


class Salary(BaseModel):
    min: int | None = None
    max: int | None = None
    currency: str = "USD"


class JobPosting(BaseModel):
    title: str = ""
    skills: list[str] = []
    expiry_date: datetime | None = None
    status: JobStatus = "active"
    is_expired: bool = False
    is_active: bool = True
    salary: Salary = Salary()

    @field_validator("expiry_date")
    @classmethod
    def expiry_date_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class ExpiryUpdate(BaseModel):
    is_expired: bool = False
    status: JobStatus = "active"
    is_active: bool = True
    changed: bool = False

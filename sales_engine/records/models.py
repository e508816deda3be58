"""
Pydantic row models for the five Record Store collections.

JSON keys are camelCase; attributes are snake_case with camelCase aliases.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RecordBase(BaseModel):
    """Shared config: immutable rows, populated by alias or field name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Account(RecordBase):
    id: str = Field(..., min_length=1)
    name: str
    segment: str = Field(..., description="Account tier, e.g. 'Enterprise'")
    status: str = ""
    created_at: Optional[date] = Field(None, alias="createdAt")


class Rep(RecordBase):
    id: str = Field(..., min_length=1)
    name: str
    email: str = ""
    team: str = ""
    hire_date: Optional[date] = Field(None, alias="hireDate")


class Deal(RecordBase):
    id: str = Field(..., min_length=1)
    account_id: str = Field(..., alias="accountId")
    rep_id: str = Field(..., alias="repId")
    value: float = Field(..., ge=0)
    status: Literal["Open", "Won", "Lost"]
    stage: str = ""
    created_at: date = Field(..., alias="createdAt")
    closed_at: Optional[date] = Field(None, alias="closedAt")

    @model_validator(mode="after")
    def check_closed_at(self):
        """closedAt is set iff the deal is Won or Lost."""
        if self.status == "Open" and self.closed_at is not None:
            raise ValueError(f"Open deal {self.id} must not have closedAt")
        if self.status != "Open" and self.closed_at is None:
            raise ValueError(f"{self.status} deal {self.id} is missing closedAt")
        return self


class Activity(RecordBase):
    id: str = Field(..., min_length=1)
    account_id: str = Field(..., alias="accountId")
    rep_id: str = Field("", alias="repId")
    type: str = ""
    activity_date: date = Field(..., alias="date")
    notes: str = ""


class Target(RecordBase):
    month: str = Field(..., pattern=r"^\d{4}-(0[1-9]|1[0-2])$")
    target: float = Field(..., ge=0)

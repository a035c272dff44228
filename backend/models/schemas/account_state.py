"""Account snapshot and login decisions for the state checker."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, field_validator

Role = Literal["user", "job-seeker", "job-poster", "admin"]
ApprovalStatus = Literal["pending", "approved", "rejected"]


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AccountState(BaseModel):
    """Read-only snapshot of the fields that gate a login.

    Owned and persisted by the user-management side; this service only
    evaluates decisions against it.
    """
    role: Role = "user"
    requested_role: Role | None = None
    admin_approval_status: ApprovalStatus | None = None
    is_active: bool = True
    login_attempts: int = 0
    lock_until: datetime | None = None

    @field_validator("lock_until")
    @classmethod
    def lock_until_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class LoginEligibility(BaseModel):
    allowed: bool = True
    reasons: list[str] = []
    remediation: list[str] = []


class AttemptUpdate(BaseModel):
    """New lockout counters after a login attempt.

    lock_until of None means the lock must be cleared.
    """
    login_attempts: int = 0
    lock_until: datetime | None = None
    locked: bool = False

    def apply(self, account: AccountState) -> AccountState:
        return account.model_copy(update={
            "login_attempts": self.login_attempts,
            "lock_until": self.lock_until,
        })


class RoleChange(BaseModel):
    """Result of a role transition (switch or admin decision)."""
    previous_role: Role
    role: Role
    admin_approval_status: ApprovalStatus | None = None
    message: str = ""

"""Account/role state checker.

Pure decisions over an AccountState snapshot: login eligibility, the
failed-login lockout counter, and role transitions gated by admin approval.
Persisting the results is the caller's job.

Lockout:
    Unlocked --(failure, attempts reach max)--> Locked until now + duration
    Locked   --(time passes lock_until)------> Unlocked (checked lazily)
    any      --(success)---------------------> attempts 0, lock cleared

A failure while still locked counts the attempt but leaves lock_until as it
is. A failure after an expired lock restarts the counter at 1.
"""

import logging
from datetime import datetime, timedelta, timezone

from config import settings
from models.schemas.account_state import (
    AccountState,
    AttemptUpdate,
    LoginEligibility,
    RoleChange,
)

logger = logging.getLogger(__name__)

REASON_ROLE_MISMATCH = "role mismatch: admin privileges required"
REASON_APPROVAL_PENDING = "admin approval pending/rejected"
REASON_LOCKED = "account locked: too many failed login attempts"
REASON_DEACTIVATED = "account deactivated"
REASON_NOT_ADMIN = "admin access required"

SWITCHABLE_ROLES = ("job-seeker", "job-poster")


class RoleTransitionError(ValueError):
    """A role change that the workflow does not allow."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def is_locked(account: AccountState, now: datetime | None = None) -> bool:
    return account.lock_until is not None and account.lock_until > _now(now)


def _approval_label(account: AccountState) -> str:
    return account.admin_approval_status or "not set"


def can_login(
    account: AccountState,
    requested_role: str | None = None,
    now: datetime | None = None,
) -> LoginEligibility:
    """Evaluate every login condition and report all violations at once."""
    now = _now(now)
    reasons: list[str] = []
    remediation: list[str] = []

    if requested_role == "admin":
        if account.role != "admin":
            reasons.append(REASON_ROLE_MISMATCH)
        elif account.admin_approval_status != "approved":
            reasons.append(REASON_APPROVAL_PENDING)
            remediation.append(
                f"An administrator must approve the admin request "
                f"(status: {_approval_label(account)})"
            )

    if is_locked(account, now):
        reasons.append(REASON_LOCKED)
        remediation.append(f"Wait until {account.lock_until.isoformat()} or reset login attempts")

    if not account.is_active:
        reasons.append(REASON_DEACTIVATED)
        remediation.append("Reactivate the account")

    if reasons:
        logger.info("Login denied (requested role=%s): %s", requested_role, "; ".join(reasons))

    return LoginEligibility(allowed=not reasons, reasons=reasons, remediation=remediation)


def check_admin_access(account: AccountState) -> LoginEligibility:
    """Gate for admin-only actions: an approved admin account."""
    if account.role != "admin":
        return LoginEligibility(allowed=False, reasons=[REASON_NOT_ADMIN])
    if account.admin_approval_status != "approved":
        return LoginEligibility(
            allowed=False,
            reasons=[REASON_APPROVAL_PENDING],
            remediation=[
                f"An administrator must approve the admin request "
                f"(status: {_approval_label(account)})"
            ],
        )
    return LoginEligibility(allowed=True)


def record_failed_attempt(
    account: AccountState,
    now: datetime | None = None,
    max_attempts: int | None = None,
    lock_duration: timedelta | None = None,
) -> AttemptUpdate:
    """Return the lockout counters after one more failed login."""
    now = _now(now)
    if max_attempts is None:
        max_attempts = settings.max_login_attempts
    if lock_duration is None:
        lock_duration = timedelta(hours=settings.lock_duration_hours)

    if account.lock_until is not None and account.lock_until < now:
        return AttemptUpdate(login_attempts=1, lock_until=None, locked=False)

    attempts = account.login_attempts + 1
    lock_until = account.lock_until
    already_locked = is_locked(account, now)

    if attempts >= max_attempts and not already_locked:
        lock_until = now + lock_duration
        logger.info("Account locked after %d failed attempts until %s", attempts, lock_until)

    return AttemptUpdate(
        login_attempts=attempts,
        lock_until=lock_until,
        locked=lock_until is not None and lock_until > now,
    )


def record_successful_attempt(account: AccountState) -> AttemptUpdate:
    if account.login_attempts or account.lock_until is not None:
        logger.debug("Clearing %d failed login attempts", account.login_attempts)
    return AttemptUpdate(login_attempts=0, lock_until=None, locked=False)


def initial_approval_status(requested_role: str | None) -> str | None:
    """Approval status for a new registration."""
    return "pending" if requested_role == "admin" else None


def switch_role(account: AccountState, new_role: str) -> RoleChange:
    """Move a non-admin user between job-seeker and job-poster."""
    if new_role not in SWITCHABLE_ROLES:
        raise RoleTransitionError("Invalid role. Must be 'job-seeker' or 'job-poster'")
    if account.role == "admin":
        raise RoleTransitionError("Admins cannot switch to other roles", status_code=403)
    if account.role == new_role:
        raise RoleTransitionError(f"User is already a {new_role}")

    logger.info("Role switched from %s to %s", account.role, new_role)
    return RoleChange(
        previous_role=account.role,
        role=new_role,
        admin_approval_status=account.admin_approval_status,
        message=f"Role switched to {new_role} successfully",
    )


def decide_admin_request(account: AccountState, action: str) -> RoleChange:
    """Approve or reject a pending admin request."""
    if action == "approve":
        role, status = "admin", "approved"
    elif action == "reject":
        role, status = account.role, "rejected"
    else:
        raise RoleTransitionError("Invalid action. Use 'approve' or 'reject'")

    logger.info("Admin request %sd (previous role=%s)", action, account.role)
    return RoleChange(
        previous_role=account.role,
        role=role,
        admin_approval_status=status,
        message=f"Admin request {action}d successfully",
    )

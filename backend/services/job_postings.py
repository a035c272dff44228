"""Job posting rules: expiry and salary display."""

import logging
from datetime import datetime, timezone

from models.schemas.job_posting import ExpiryUpdate, JobPosting, Salary

logger = logging.getLogger(__name__)


def check_expiry(job: JobPosting, now: datetime | None = None) -> ExpiryUpdate:
    """Expire a posting whose expiry date has passed.

    Only a posting not yet flagged as expired changes; the update takes it
    out of the active listings.
    """
    now = now if now is not None else datetime.now(timezone.utc)
    if job.expiry_date is not None and job.expiry_date <= now and not job.is_expired:
        logger.info("Job %r expired at %s", job.title, job.expiry_date)
        return ExpiryUpdate(is_expired=True, status="expired", is_active=False, changed=True)
    return ExpiryUpdate(
        is_expired=job.is_expired,
        status=job.status,
        is_active=job.is_active,
        changed=False,
    )


def format_salary(salary: Salary) -> str:
    if not salary.min and not salary.max:
        return "Negotiable"
    if salary.min and salary.max:
        return f"{salary.currency} {salary.min:,} - {salary.max:,}"
    if salary.min:
        return f"{salary.currency} {salary.min:,}+"
    return f"Up to {salary.currency} {salary.max:,}"

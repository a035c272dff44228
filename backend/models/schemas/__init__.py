"""Pydantic contracts shared by the services and the API layer."""

from models.schemas.account_state import (
    AccountState,
    AttemptUpdate,
    LoginEligibility,
    RoleChange,
)
from models.schemas.job_posting import ExpiryUpdate, JobPosting, Salary
from models.schemas.skill_match import (
    MatchLevel,
    MatchReport,
    MatchResult,
    Recommendation,
    SkillEntry,
    SkillsBreakdown,
)

__all__ = [
    "AccountState",
    "AttemptUpdate",
    "LoginEligibility",
    "RoleChange",
    "ExpiryUpdate",
    "JobPosting",
    "Salary",
    "MatchLevel",
    "MatchReport",
    "MatchResult",
    "Recommendation",
    "SkillEntry",
    "SkillsBreakdown",
]

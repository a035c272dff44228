from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from models.schemas.account_state import AccountState
from models.schemas.job_posting import JobPosting


class MatchRequest(BaseModel):
    candidate_skills: list[Any] | None = Field(
        None, max_length=500, description="Skill labels or {name} records of the job seeker"
    )
    required_skills: list[Any] | None = Field(
        None, max_length=500, description="Skill labels or {name} records required by the job"
    )
    max_recommendations: int | None = Field(None, ge=0, le=50)


class JobMatchRequest(BaseModel):
    candidate_skills: list[Any] | None = Field(None, max_length=500)
    job: JobPosting
    max_recommendations: int | None = Field(None, ge=0, le=50)
    now: datetime | None = None


class RecommendRequest(BaseModel):
    missing_skills: list[Any] | None = Field(None, max_length=500)


class AccountRequest(BaseModel):
    account: AccountState
    now: datetime | None = None


class LoginEligibilityRequest(AccountRequest):
    requested_role: str | None = None


class SwitchRoleRequest(BaseModel):
    account: AccountState
    new_role: str


class AdminDecisionRequest(BaseModel):
    account: AccountState
    action: str = Field(..., description="'approve' or 'reject'")


class JobExpiryRequest(BaseModel):
    job: JobPosting
    now: datetime | None = None

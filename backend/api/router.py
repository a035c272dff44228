from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    AccountRequest,
    AdminDecisionRequest,
    JobExpiryRequest,
    JobMatchRequest,
    LoginEligibilityRequest,
    MatchRequest,
    RecommendRequest,
    SwitchRoleRequest,
)
from models.responses import JobMatchResponse
from models.schemas.account_state import AttemptUpdate, LoginEligibility, RoleChange, as_utc
from models.schemas.job_posting import ExpiryUpdate
from models.schemas.skill_match import MatchLevel, MatchReport, Recommendation
from services import account_state, job_postings, match_report, skill_matching

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "max_login_attempts": settings.max_login_attempts,
        "lock_duration_hours": settings.lock_duration_hours,
    }


# ---------------------------------------------------------------------------
# Skill matching
# ---------------------------------------------------------------------------

@router.post("/match", response_model=MatchReport)
@limiter.limit(settings.rate_limit)
async def match(request: Request, body: MatchRequest):
    return match_report.build_match_report(
        body.candidate_skills, body.required_skills, body.max_recommendations
    )


@router.post("/match/job", response_model=JobMatchResponse)
@limiter.limit(settings.rate_limit)
async def match_job(request: Request, body: JobMatchRequest):
    report = match_report.build_job_match_report(
        body.candidate_skills, body.job, body.max_recommendations
    )
    return JobMatchResponse(
        report=report,
        expiry=job_postings.check_expiry(body.job, as_utc(body.now)),
        formatted_salary=job_postings.format_salary(body.job.salary),
    )


@router.get("/match/level/{percentage}", response_model=MatchLevel)
async def match_level(percentage: float):
    return skill_matching.classify_level(percentage)


@router.post("/recommendations", response_model=list[Recommendation])
@limiter.limit(settings.rate_limit)
async def recommendations(request: Request, body: RecommendRequest):
    return skill_matching.recommend(body.missing_skills)


# ---------------------------------------------------------------------------
# Account state
# ---------------------------------------------------------------------------

@router.post("/accounts/login-eligibility", response_model=LoginEligibility)
@limiter.limit(settings.rate_limit)
async def login_eligibility(request: Request, body: LoginEligibilityRequest):
    return account_state.can_login(body.account, body.requested_role, as_utc(body.now))


@router.post("/accounts/failed-attempt", response_model=AttemptUpdate)
@limiter.limit(settings.rate_limit)
async def failed_attempt(request: Request, body: AccountRequest):
    return account_state.record_failed_attempt(body.account, as_utc(body.now))


@router.post("/accounts/successful-attempt", response_model=AttemptUpdate)
@limiter.limit(settings.rate_limit)
async def successful_attempt(request: Request, body: AccountRequest):
    return account_state.record_successful_attempt(body.account)


@router.post("/accounts/admin-access", response_model=LoginEligibility)
@limiter.limit(settings.rate_limit)
async def admin_access(request: Request, body: AccountRequest):
    return account_state.check_admin_access(body.account)


@router.post("/accounts/switch-role", response_model=RoleChange)
@limiter.limit(settings.rate_limit)
async def switch_role(request: Request, body: SwitchRoleRequest):
    try:
        return account_state.switch_role(body.account, body.new_role)
    except account_state.RoleTransitionError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/accounts/admin-decision", response_model=RoleChange)
@limiter.limit(settings.rate_limit)
async def admin_decision(request: Request, body: AdminDecisionRequest):
    try:
        return account_state.decide_admin_request(body.account, body.action)
    except account_state.RoleTransitionError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


# ---------------------------------------------------------------------------
# Job postings
# ---------------------------------------------------------------------------

@router.post("/jobs/expiry", response_model=ExpiryUpdate)
@limiter.limit(settings.rate_limit)
async def job_expiry(request: Request, body: JobExpiryRequest):
    return job_postings.check_expiry(body.job, as_utc(body.now))

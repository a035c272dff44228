"""Match report: score, band and top recommendations for one candidate/job pair.

Flow:
    candidate_skills + required_skills
      ├─ compute_match()      → MatchResult
      ├─ classify_level()     → MatchLevel
      └─ recommend(missing)   → Recommendation[] (first N shown)
"""

import logging
from typing import Any, Iterable

from config import settings
from models.schemas.job_posting import JobPosting
from models.schemas.skill_match import MatchReport
from services.skill_matching import classify_level, compute_match, recommend

logger = logging.getLogger(__name__)


def build_match_report(
    candidate_skills: Iterable[Any] | None,
    required_skills: Iterable[Any] | None,
    max_recommendations: int | None = None,
) -> MatchReport:
    """Run the engine and keep only the recommendations a page displays."""
    if max_recommendations is None:
        max_recommendations = settings.max_displayed_recommendations

    result = compute_match(candidate_skills, required_skills)
    level = classify_level(result.percentage)
    recommendations = recommend(result.missing_skills)[:max(0, max_recommendations)]

    logger.info(
        "Match report: %d%% (%s), %d missing skills",
        result.percentage, level.level, len(result.missing_skills),
    )
    return MatchReport(result=result, level=level, recommendations=recommendations)


def build_job_match_report(
    candidate_skills: Iterable[Any] | None,
    job: JobPosting,
    max_recommendations: int | None = None,
) -> MatchReport:
    return build_match_report(candidate_skills, job.skills, max_recommendations)

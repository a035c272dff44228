"""Skill match output: coverage of a job's required skills by a candidate."""

from pydantic import BaseModel


class SkillEntry(BaseModel):
    """A skill supplied as a record rather than a bare label."""
    name: str = ""


class SkillsBreakdown(BaseModel):
    """Normalized inputs and outputs of a match, for display."""
    matched: list[str] = []
    missing: list[str] = []
    candidate_skills: list[str] = []
    required_skills: list[str] = []


class MatchResult(BaseModel):
    """Structured output of the skill match engine.

    matched_skills and missing_skills keep the order of the normalized
    required-skill list. percentage is 0 when nothing is required.
    """
    percentage: int = 0  # 0-100
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    total_required: int = 0
    total_matched: int = 0
    skills_breakdown: SkillsBreakdown = SkillsBreakdown()


class MatchLevel(BaseModel):
    """Qualitative band for a match percentage."""
    level: str  # Excellent, Good, Moderate, Fair, Low
    color: str
    description: str
    icon: str


class Recommendation(BaseModel):
    """Learning resources for a missing skill."""
    skill: str
    platforms: list[str] = []
    priority: str = "Low"  # High, Medium, Low


class MatchReport(BaseModel):
    result: MatchResult = MatchResult()
    level: MatchLevel
    recommendations: list[Recommendation] = []

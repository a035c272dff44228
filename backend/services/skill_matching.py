"""Skill match engine: required-skill coverage of a candidate's skill list.

A required skill counts as matched when any candidate skill is equal to it,
contains it, is contained by it, or is a declared synonym. Matching is an
existence check per required skill, not a one-to-one assignment.

None of the functions here raise on malformed input: missing lists, empty
labels and non-string entries degrade to empty results, 0% and "Low".
"""

import logging
import math
from typing import Any, Iterable

from models.schemas.skill_match import (
    MatchLevel,
    MatchResult,
    Recommendation,
    SkillsBreakdown,
)
from services.skill_catalog import (
    DEFAULT_PLATFORMS,
    HIGH_PRIORITY_SKILLS,
    LEARNING_PLATFORMS,
    MATCH_LEVEL_BANDS,
    MEDIUM_PRIORITY_SKILLS,
    SKILL_SYNONYMS,
)

logger = logging.getLogger(__name__)


def extract_label(entry: Any) -> str:
    """Return the raw label of a skill entry, or "" if it has none.

    Accepts plain strings, mappings with a "name" key and objects with a
    ``name`` attribute.
    """
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        name = entry.get("name")
    else:
        name = getattr(entry, "name", None)
    return name if isinstance(name, str) else ""


def normalize_skill(entry: Any) -> str:
    return extract_label(entry).lower().strip()


def normalize_skills(entries: Iterable[Any] | None) -> list[str]:
    """Normalize a skill list, keeping order and duplicates, dropping blanks."""
    if not entries:
        return []
    normalized = (normalize_skill(e) for e in entries)
    return [s for s in normalized if s]


def are_synonyms(a: str, b: str) -> bool:
    """Check whether two normalized labels are declared synonyms."""
    for canonical, aliases in SKILL_SYNONYMS.items():
        if (
            (a == canonical and b in aliases)
            or (b == canonical and a in aliases)
            or (a in aliases and b in aliases)
        ):
            return True
    return False


def skills_match(candidate: str, required: str) -> bool:
    """Apply the matching rules, cheapest first."""
    return (
        candidate == required
        or candidate in required
        or required in candidate
        or are_synonyms(candidate, required)
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_match(
    candidate_skills: Iterable[Any] | None,
    required_skills: Iterable[Any] | None,
) -> MatchResult:
    """Compute how many of the required skills the candidate covers."""
    candidate = normalize_skills(candidate_skills)
    required = normalize_skills(required_skills)

    if not candidate or not required:
        return MatchResult(
            percentage=0,
            matched_skills=[],
            missing_skills=list(required),
            total_required=len(required),
            total_matched=0,
            skills_breakdown=SkillsBreakdown(
                missing=list(required),
                candidate_skills=candidate,
                required_skills=required,
            ),
        )

    matched: list[str] = []
    missing: list[str] = []
    for req in required:
        if any(skills_match(c, req) for c in candidate):
            matched.append(req)
        else:
            missing.append(req)

    percentage = _round_half_up(len(matched) / len(required) * 100)
    logger.debug(
        "Skill match: %d/%d required skills covered (%d%%)",
        len(matched), len(required), percentage,
    )

    return MatchResult(
        percentage=percentage,
        matched_skills=matched,
        missing_skills=missing,
        total_required=len(required),
        total_matched=len(matched),
        skills_breakdown=SkillsBreakdown(
            matched=list(matched),
            missing=list(missing),
            candidate_skills=candidate,
            required_skills=required,
        ),
    )


def classify_level(percentage: float) -> MatchLevel:
    """Map a percentage onto its match band.

    Values outside 0-100 are clamped, so negatives are Low and anything
    above 100 is Excellent.
    """
    clamped = min(100.0, max(0.0, percentage))
    band = next(
        (b for b in MATCH_LEVEL_BANDS if clamped >= b[0]),
        MATCH_LEVEL_BANDS[-1],
    )
    _, level, color, description, icon = band
    return MatchLevel(level=level, color=color, description=description, icon=icon)


def skill_priority(skill: str) -> str:
    key = normalize_skill(skill)
    if key in HIGH_PRIORITY_SKILLS:
        return "High"
    if key in MEDIUM_PRIORITY_SKILLS:
        return "Medium"
    return "Low"


def recommend(missing_skills: Iterable[Any] | None) -> list[Recommendation]:
    """Build one learning recommendation per missing skill, in input order.

    Repeated skills are not collapsed and nothing is truncated.
    """
    if not missing_skills:
        return []

    recommendations: list[Recommendation] = []
    for entry in missing_skills:
        skill = extract_label(entry)
        key = skill.lower().strip()
        platforms = LEARNING_PLATFORMS.get(key, DEFAULT_PLATFORMS)
        recommendations.append(Recommendation(
            skill=skill,
            platforms=list(platforms),
            priority=skill_priority(key),
        ))
    return recommendations

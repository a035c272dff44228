"""Tests for the skill match engine."""

import pytest

from models.schemas.skill_match import SkillEntry
from services.skill_matching import (
    are_synonyms,
    classify_level,
    compute_match,
    extract_label,
    normalize_skills,
    recommend,
    skill_priority,
    skills_match,
)


class TestNormalization:
    def test_extract_label_from_string(self):
        assert extract_label("React") == "React"

    def test_extract_label_from_dict_and_model(self):
        assert extract_label({"name": "SQL"}) == "SQL"
        assert extract_label(SkillEntry(name="Docker")) == "Docker"

    def test_extract_label_without_name(self):
        assert extract_label({"title": "SQL"}) == ""
        assert extract_label({"name": 42}) == ""
        assert extract_label(None) == ""
        assert extract_label(7) == ""

    def test_normalize_skills_drops_blanks_keeps_order(self):
        skills = ["  React ", "", {"name": " SQL"}, None, "   ", "react"]
        assert normalize_skills(skills) == ["react", "sql", "react"]

    def test_normalize_skills_none(self):
        assert normalize_skills(None) == []


class TestSynonyms:
    def test_canonical_and_alias(self):
        assert are_synonyms("javascript", "js")
        assert are_synonyms("js", "javascript")

    def test_two_aliases_of_same_skill(self):
        assert are_synonyms("ml", "ai")
        assert are_synonyms("mysql", "postgresql")

    def test_unrelated(self):
        assert not are_synonyms("python", "java")
        assert not are_synonyms("js", "ts")

    def test_skills_match_rules(self):
        assert skills_match("react", "react")
        assert skills_match("css", "css3 animations")  # candidate inside required
        assert skills_match("reactjs", "react")  # required inside candidate
        assert skills_match("amazon web services", "aws")
        assert not skills_match("ruby", "python")


class TestComputeMatch:
    def test_empty_candidate(self):
        result = compute_match([], ["  Python", "SQL "])
        assert result.percentage == 0
        assert result.matched_skills == []
        assert result.missing_skills == ["python", "sql"]
        assert result.total_required == 2
        assert result.total_matched == 0

    def test_empty_required(self):
        result = compute_match(["python"], [])
        assert result.percentage == 0
        assert result.total_required == 0
        assert result.missing_skills == []

    def test_absent_inputs(self):
        result = compute_match(None, None)
        assert result.percentage == 0
        assert result.missing_skills == []
        assert result.total_required == 0

    def test_case_and_whitespace_insensitive(self):
        result = compute_match(["  React "], ["react"])
        assert result.matched_skills == ["react"]
        assert result.percentage == 100

    def test_synonym_both_directions(self):
        assert compute_match(["js"], ["javascript"]).percentage == 100
        assert compute_match(["JavaScript"], ["js"]).percentage == 100

    def test_substring_rule(self):
        result = compute_match(["reactjs"], ["react"])
        assert result.matched_skills == ["react"]
        assert result.percentage == 100

    def test_concrete_scenario(self):
        result = compute_match(
            ["JavaScript", "CSS", "Python"],
            ["javascript", "react", "css", "sql"],
        )
        assert result.matched_skills == ["javascript", "css"]
        assert result.missing_skills == ["react", "sql"]
        assert result.percentage == 50
        assert classify_level(result.percentage).level == "Moderate"

    def test_record_entries(self):
        result = compute_match([{"name": "Python"}, SkillEntry(name="Docker")], ["python", "docker", "go"])
        assert result.matched_skills == ["python", "docker"]
        assert result.missing_skills == ["go"]
        assert result.percentage == 67

    def test_order_preserved_and_duplicates_counted(self):
        result = compute_match(["sql"], ["SQL", "rust", "sql"])
        assert result.matched_skills == ["sql", "sql"]
        assert result.missing_skills == ["rust"]
        assert result.total_required == 3

    def test_percentage_rounds_half_up(self):
        required = ["python", "a1", "a2", "a3", "a4", "a5", "a6", "a7"]
        result = compute_match(["python"], required)
        assert result.percentage == 13  # 12.5

    @pytest.mark.parametrize(
        "candidate,required",
        [
            (["python", "go"], ["python", "java", "rust"]),
            (["react"], ["reactjs", "vue", "css"]),
            ([], ["a", "b"]),
            (["x"], []),
            (["sql", "aws"], ["mysql", "amazon web services", "kotlin", "sql"]),
        ],
    )
    def test_counts_are_consistent(self, candidate, required):
        result = compute_match(candidate, required)
        assert result.total_matched == len(result.matched_skills)
        assert result.total_matched + len(result.missing_skills) == result.total_required
        if result.total_required:
            expected = int(result.total_matched / result.total_required * 100 + 0.5)
            assert result.percentage == expected
        else:
            assert result.percentage == 0

    def test_breakdown(self):
        result = compute_match(["Python "], ["python", "SQL"])
        assert result.skills_breakdown.candidate_skills == ["python"]
        assert result.skills_breakdown.required_skills == ["python", "sql"]
        assert result.skills_breakdown.matched == ["python"]
        assert result.skills_breakdown.missing == ["sql"]


class TestClassifyLevel:
    @pytest.mark.parametrize(
        "percentage,level",
        [
            (100, "Excellent"),
            (90, "Excellent"),
            (89, "Good"),
            (75, "Good"),
            (74, "Moderate"),
            (50, "Moderate"),
            (49, "Fair"),
            (25, "Fair"),
            (24, "Low"),
            (0, "Low"),
        ],
    )
    def test_boundaries(self, percentage, level):
        assert classify_level(percentage).level == level

    def test_out_of_range_is_clamped(self):
        assert classify_level(-10).level == "Low"
        assert classify_level(150).level == "Excellent"

    def test_display_fields(self):
        level = classify_level(95)
        assert level.color == "#10b981"
        assert level.icon
        assert "Outstanding" in level.description


class TestRecommend:
    def test_known_and_unknown_skill(self):
        recs = recommend(["sql", "unknownlang"])
        assert [r.skill for r in recs] == ["sql", "unknownlang"]
        assert recs[0].platforms == ["W3Schools SQL", "SQLBolt", "Mode SQL Tutorial"]
        assert recs[0].priority == "High"
        assert recs[1].platforms == ["Coursera", "Udemy", "YouTube tutorials"]
        assert recs[1].priority == "Low"

    def test_case_insensitive_lookup(self):
        recs = recommend(["Node.js"])
        assert recs[0].platforms[0] == "Node.js Documentation"
        assert recs[0].priority == "Medium"

    def test_no_dedup_no_truncation(self):
        recs = recommend(["react", "react", "go", "rust", "docker"])
        assert len(recs) == 5

    def test_empty(self):
        assert recommend([]) == []
        assert recommend(None) == []

    def test_skill_priority(self):
        assert skill_priority("HTML") == "High"
        assert skill_priority("docker") == "Medium"
        assert skill_priority("cobol") == "Low"

"""Tests for AI skill suggestions with the Gemini boundary patched out."""

from unittest.mock import AsyncMock, patch

import pytest

from models.schemas.skill import Skill, SkillCategory
from services import skill_generator


BUSINESS_RESPONSE = {
    "generalSkillNames": ["Critical Thinking", "Team Leadership", "Made Up Skill", "AI Literacy"],
    "functionalSkills": [
        {"name": "Financial Modeling", "description": "Build forecasting models"},
        {"name": "Vendor Negotiation", "description": "Negotiate supplier contracts"},
        {"name": "Extra Skill", "description": "Should be dropped"},
    ],
}


def _patch_json(return_value):
    return patch("services.gemini_client.generate_json", AsyncMock(return_value=return_value))


def _patch_text(return_value):
    return patch("services.gemini_client.generate_text", AsyncMock(return_value=return_value))


class TestCatalogue:
    def test_catalogue_text_lists_every_category(self):
        text = skill_generator.catalogue_text()
        for category in ("problem_solving", "communication", "ai_capability", "leadership"):
            assert f"Category: {category}" in text
        assert "- Prompt Engineering: Skill in crafting effective AI prompts" in text


class TestBusinessSkills:
    @pytest.mark.asyncio
    async def test_three_general_and_two_functional(self):
        with _patch_json(BUSINESS_RESPONSE):
            skills = await skill_generator.generate_business_skills("Analyst", "Grow revenue")

        assert [s.name for s in skills] == [
            "Critical Thinking", "Team Leadership", "Made Up Skill",
            "Financial Modeling", "Vendor Negotiation",
        ]
        assert skills[0].category == SkillCategory.PROBLEM_SOLVING
        assert skills[1].category == SkillCategory.LEADERSHIP
        assert skills[2].category == SkillCategory.PROBLEM_SOLVING
        assert skills[2].description == skill_generator.GENERIC_SKILL_DESCRIPTION
        assert all(s.category == SkillCategory.FUNCTIONAL for s in skills[3:])
        assert all(s.rating == 1 for s in skills)

    @pytest.mark.asyncio
    async def test_failure_returns_empty_list(self):
        with _patch_json(None):
            assert await skill_generator.generate_business_skills("Analyst", "Grow revenue") == []

    @pytest.mark.asyncio
    async def test_reuses_existing_functional_skill(self):
        existing = Skill(
            id="skill-existing",
            name="Financial Modelling",
            description="Existing description",
            category=SkillCategory.FUNCTIONAL,
        )
        with _patch_json(BUSINESS_RESPONSE):
            skills = await skill_generator.generate_business_skills(
                "Analyst", "Grow revenue", existing_functional=[existing]
            )
        reused = skills[3]
        assert reused.id == "skill-existing"
        assert reused.name == "Financial Modelling"
        assert reused.description == "Existing description"

    def test_find_duplicate_ignores_unrelated_names(self):
        existing = [Skill(name="Cloud Architecture", category=SkillCategory.FUNCTIONAL)]
        assert skill_generator.find_duplicate("Vendor Negotiation", existing) is None


class TestCareerSkills:
    @pytest.mark.asyncio
    async def test_parses_alignment_and_themes(self):
        response = {
            "alignment": {"level": "Strong alignment", "explanation": "Role fits the goal."},
            "skillThemes": ["Coaching", "Storytelling"],
            "generalSkillNames": ["Active Listening"],
            "functionalSkills": [{"name": "Workshop Facilitation", "description": "Run workshops"}],
        }
        with _patch_json(response):
            result = await skill_generator.generate_career_skills("Manager", "Become a coach")

        assert result.alignment.level == "Strong alignment"
        assert result.skill_themes == ["Coaching", "Storytelling"]
        assert [s.name for s in result.skills] == ["Active Listening", "Workshop Facilitation"]
        assert result.skills[0].category == SkillCategory.COMMUNICATION
        assert result.degraded is False

    @pytest.mark.asyncio
    async def test_failure_fallback(self):
        with _patch_json(None):
            result = await skill_generator.generate_career_skills("Manager", "Become a coach")
        assert result.skills == []
        assert result.alignment.level == "Partial alignment"
        assert "AItlas encountered an issue" in result.intro
        assert result.degraded is True


class TestTextGeneration:
    @pytest.mark.asyncio
    async def test_key_results(self):
        with _patch_text("- Ship v2 by Q3"):
            assert await skill_generator.generate_key_results("PM", "Launch v2") == "- Ship v2 by Q3"

    @pytest.mark.asyncio
    async def test_key_results_fallback(self):
        with _patch_text(None):
            result = await skill_generator.generate_key_results("PM", "Launch v2")
        assert result == skill_generator.KEY_RESULTS_ERROR

    @pytest.mark.asyncio
    async def test_optimize_falls_back_to_original(self):
        with _patch_text(None):
            assert await skill_generator.optimize_text("be better") == "be better"
            assert await skill_generator.optimize_business_goal("PM", "sell more") == "sell more"

    @pytest.mark.asyncio
    async def test_optimize_uses_model_output(self):
        with _patch_text("Lead two cross-team launches this year."):
            assert await skill_generator.optimize_text("lead stuff") == "Lead two cross-team launches this year."


class TestFunctionalSkillDedupe:
    @pytest.mark.asyncio
    async def test_same_existing_skill_reused_once(self):
        existing = Skill(
            id="skill-existing",
            name="Financial Modeling",
            category=SkillCategory.FUNCTIONAL,
        )
        response = {
            "generalSkillNames": [],
            "functionalSkills": [
                {"name": "Financial Modelling", "description": "a"},
                {"name": "financial modeling", "description": "b"},
            ],
        }
        with _patch_json(response):
            skills = await skill_generator.generate_business_skills(
                "Analyst", "Grow revenue", existing_functional=[existing]
            )
        assert [s.id for s in skills] == ["skill-existing"]

    @pytest.mark.asyncio
    async def test_malformed_functional_items_skipped(self):
        existing = [Skill(name="Budgeting", category=SkillCategory.FUNCTIONAL)]
        response = {
            "generalSkillNames": [],
            "functionalSkills": [
                {"name": 42, "description": "not a name"},
                {"name": "Forecasting", "description": ["bad"]},
            ],
        }
        with _patch_json(response):
            skills = await skill_generator.generate_business_skills(
                "Analyst", "Grow revenue", existing_functional=existing
            )
        assert [s.name for s in skills] == ["Forecasting"]
        assert skills[0].description == ""

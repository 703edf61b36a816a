"""
업적 카탈로그 테스트
"""
import pytest

from config.achievements import ACHIEVEMENT_TRIGGERS
from exceptions import DuplicateBadgeError, InvalidAchievementDefinitionError
from models.achievement import AchievementDefinition, AchievementTier, ActivityCategory
from service.achievement import AchievementCatalog


def _definition(badge_id: str = "sample", progress_required: float = 1) -> AchievementDefinition:
    return AchievementDefinition(
        badge_id=badge_id,
        title="Sample",
        description="Sample badge",
        tier=AchievementTier.BRONZE,
        icon_name="leaf.fill",
        progress_required=progress_required,
    )


class TestDefaultCatalog:
    def test_contains_every_badge_in_group_order(self):
        catalog = AchievementCatalog.default()

        assert len(catalog) == 23
        assert catalog.badge_ids()[:4] == (
            "first_steps", "getting_started", "eco_enthusiast", "eco_champion"
        )
        assert catalog.badge_ids()[-2:] == ("challenge_completer", "challenge_champion")

    def test_badge_ids_are_unique(self):
        ids = AchievementCatalog.default().badge_ids()
        assert len(ids) == len(set(ids))

    def test_lookup(self):
        catalog = AchievementCatalog.default()

        week_warrior = catalog.get("week_warrior")
        assert week_warrior.progress_required == 7
        assert week_warrior.tier == AchievementTier.BRONZE
        assert week_warrior.category is None
        assert catalog.get("level_five").title == "Rising Star"

    def test_unknown_badge_returns_none(self):
        catalog = AchievementCatalog.default()
        assert catalog.get("does_not_exist") is None
        assert "does_not_exist" not in catalog

    def test_filters(self):
        catalog = AchievementCatalog.default()

        water = catalog.by_category(ActivityCategory.WATER)
        assert [d.badge_id for d in water] == ["water_saver", "water_guardian"]
        assert [d.badge_id for d in catalog.by_tier(AchievementTier.PLATINUM)] == ["streak_legend"]

    def test_every_trigger_badge_is_in_catalog(self):
        catalog = AchievementCatalog.default()
        triggers = ACHIEVEMENT_TRIGGERS

        badge_ids = (
            (triggers.FIRST_ACTIVITY_BADGE,)
            + triggers.ACTIVITY_COUNT_BADGES
            + triggers.CARBON_BADGES
            + triggers.WATER_BADGES
            + triggers.PLASTIC_BADGES
            + triggers.STREAK_BADGES
            + triggers.LEVEL_BADGES
            + triggers.SORTING_BADGES
            + triggers.CHALLENGE_BADGES
        )

        assert sorted(badge_ids) == sorted(catalog.badge_ids())


class TestCatalogValidation:
    def test_duplicate_badge_rejected(self):
        with pytest.raises(DuplicateBadgeError):
            AchievementCatalog([_definition("same"), _definition("same")])

    @pytest.mark.parametrize("progress_required", [0, -5])
    def test_non_positive_threshold_rejected(self, progress_required):
        with pytest.raises(InvalidAchievementDefinitionError):
            _definition(progress_required=progress_required)

    def test_empty_badge_id_rejected(self):
        with pytest.raises(InvalidAchievementDefinitionError):
            _definition(badge_id="")

    def test_definitions_are_immutable(self):
        definition = _definition()
        with pytest.raises(AttributeError):
            definition.progress_required = 99


class TestTierOrder:
    def test_rank(self):
        ranks = [tier.rank for tier in (
            AchievementTier.BRONZE,
            AchievementTier.SILVER,
            AchievementTier.GOLD,
            AchievementTier.PLATINUM,
        )]
        assert ranks == [0, 1, 2, 3]

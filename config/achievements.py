"""
업적 카탈로그 및 트리거 설정

빌드 시점에 고정되는 업적 정의 목록과, 도메인 이벤트별로 갱신할 배지 목록을 정의합니다.
배지 ID는 저장된 레코드와 연결되므로 릴리스 간에 변경하면 안 됩니다.
"""
from dataclasses import dataclass
from typing import Tuple

from models.achievement import AchievementDefinition, AchievementTier, ActivityCategory


# =============================================================================
# 시작 업적
# =============================================================================

FIRST_STEPS = AchievementDefinition(
    badge_id="first_steps",
    title="First Steps",
    description="Log your first eco-friendly activity",
    tier=AchievementTier.BRONZE,
    icon_name="leaf.fill",
    progress_required=1,
)

GETTING_STARTED = AchievementDefinition(
    badge_id="getting_started",
    title="Getting Started",
    description="Log 5 eco-friendly activities",
    tier=AchievementTier.BRONZE,
    icon_name="star.fill",
    progress_required=5,
)

ECO_ENTHUSIAST = AchievementDefinition(
    badge_id="eco_enthusiast",
    title="Eco Enthusiast",
    description="Log 25 eco-friendly activities",
    tier=AchievementTier.SILVER,
    icon_name="star.circle.fill",
    progress_required=25,
)

ECO_CHAMPION = AchievementDefinition(
    badge_id="eco_champion",
    title="Eco Champion",
    description="Log 100 eco-friendly activities",
    tier=AchievementTier.GOLD,
    icon_name="trophy.fill",
    progress_required=100,
)


# =============================================================================
# 연속 기록 업적
# =============================================================================

WEEK_WARRIOR = AchievementDefinition(
    badge_id="week_warrior",
    title="Week Warrior",
    description="Maintain a 7-day streak",
    tier=AchievementTier.BRONZE,
    icon_name="flame.fill",
    progress_required=7,
)

MONTHLY_MASTER = AchievementDefinition(
    badge_id="monthly_master",
    title="Monthly Master",
    description="Maintain a 30-day streak",
    tier=AchievementTier.SILVER,
    icon_name="flame.circle.fill",
    progress_required=30,
)

STREAK_LEGEND = AchievementDefinition(
    badge_id="streak_legend",
    title="Streak Legend",
    description="Maintain a 100-day streak",
    tier=AchievementTier.PLATINUM,
    icon_name="flame.circle",
    progress_required=100,
)


# =============================================================================
# 탄소 업적
# =============================================================================

CARBON_CUTTER = AchievementDefinition(
    badge_id="carbon_cutter",
    title="Carbon Cutter",
    description="Save 10 kg of CO₂",
    tier=AchievementTier.BRONZE,
    icon_name="cloud.fill",
    progress_required=10,
)

CARBON_CRUSHER = AchievementDefinition(
    badge_id="carbon_crusher",
    title="Carbon Crusher",
    description="Save 100 kg of CO₂",
    tier=AchievementTier.SILVER,
    icon_name="cloud.sun.fill",
    progress_required=100,
)

CARBON_HERO = AchievementDefinition(
    badge_id="carbon_hero",
    title="Carbon Hero",
    description="Save 1,000 kg of CO₂",
    tier=AchievementTier.GOLD,
    icon_name="sun.max.fill",
    progress_required=1000,
)


# =============================================================================
# 물 업적
# =============================================================================

WATER_SAVER = AchievementDefinition(
    badge_id="water_saver",
    title="Water Saver",
    description="Save 100 liters of water",
    tier=AchievementTier.BRONZE,
    icon_name="drop.fill",
    category=ActivityCategory.WATER,
    progress_required=100,
)

WATER_GUARDIAN = AchievementDefinition(
    badge_id="water_guardian",
    title="Water Guardian",
    description="Save 1,000 liters of water",
    tier=AchievementTier.SILVER,
    icon_name="drop.circle.fill",
    category=ActivityCategory.WATER,
    progress_required=1000,
)


# =============================================================================
# 플라스틱 업적
# =============================================================================

PLASTIC_FIGHTER = AchievementDefinition(
    badge_id="plastic_fighter",
    title="Plastic Fighter",
    description="Avoid 10 single-use plastic items",
    tier=AchievementTier.BRONZE,
    icon_name="bag.fill",
    category=ActivityCategory.PLASTIC,
    progress_required=10,
)

PLASTIC_FREE = AchievementDefinition(
    badge_id="plastic_free",
    title="Plastic Free",
    description="Avoid 50 single-use plastic items",
    tier=AchievementTier.SILVER,
    icon_name="bag.circle.fill",
    category=ActivityCategory.PLASTIC,
    progress_required=50,
)

OCEAN_PROTECTOR = AchievementDefinition(
    badge_id="ocean_protector",
    title="Ocean Protector",
    description="Avoid 200 single-use plastic items",
    tier=AchievementTier.GOLD,
    icon_name="water.waves",
    category=ActivityCategory.PLASTIC,
    progress_required=200,
)


# =============================================================================
# 분리수거 게임 업적
# =============================================================================

SORTING_NOVICE = AchievementDefinition(
    badge_id="sorting_novice",
    title="Sorting Novice",
    description="Correctly sort 10 items in the waste game",
    tier=AchievementTier.BRONZE,
    icon_name="arrow.3.trianglepath",
    progress_required=10,
)

SORTING_PRO = AchievementDefinition(
    badge_id="sorting_pro",
    title="Sorting Pro",
    description="Correctly sort 50 items in the waste game",
    tier=AchievementTier.SILVER,
    icon_name="arrow.triangle.2.circlepath",
    progress_required=50,
)

SORTING_MASTER = AchievementDefinition(
    badge_id="sorting_master",
    title="Sorting Master",
    description="Correctly sort 100 items with 90%+ accuracy",
    tier=AchievementTier.GOLD,
    icon_name="checkmark.seal.fill",
    progress_required=100,
)


# =============================================================================
# 레벨 업적
# =============================================================================

LEVEL_FIVE = AchievementDefinition(
    badge_id="level_five",
    title="Rising Star",
    description="Reach level 5",
    tier=AchievementTier.BRONZE,
    icon_name="5.circle.fill",
    progress_required=5,
)

LEVEL_TEN = AchievementDefinition(
    badge_id="level_ten",
    title="Eco Veteran",
    description="Reach level 10",
    tier=AchievementTier.SILVER,
    icon_name="10.circle.fill",
    progress_required=10,
)

LEVEL_TWENTY_FIVE = AchievementDefinition(
    badge_id="level_twenty_five",
    title="Eco Legend",
    description="Reach level 25",
    tier=AchievementTier.GOLD,
    icon_name="25.circle.fill",
    progress_required=25,
)


# =============================================================================
# 챌린지 업적
# =============================================================================

CHALLENGE_COMPLETER = AchievementDefinition(
    badge_id="challenge_completer",
    title="Challenge Completer",
    description="Complete your first challenge",
    tier=AchievementTier.BRONZE,
    icon_name="flag.fill",
    progress_required=1,
)

CHALLENGE_CHAMPION = AchievementDefinition(
    badge_id="challenge_champion",
    title="Challenge Champion",
    description="Complete 10 challenges",
    tier=AchievementTier.SILVER,
    icon_name="flag.checkered",
    progress_required=10,
)


ACHIEVEMENT_DEFINITIONS: Tuple[AchievementDefinition, ...] = (
    # 시작
    FIRST_STEPS,
    GETTING_STARTED,
    ECO_ENTHUSIAST,
    ECO_CHAMPION,

    # 연속 기록
    WEEK_WARRIOR,
    MONTHLY_MASTER,
    STREAK_LEGEND,

    # 탄소
    CARBON_CUTTER,
    CARBON_CRUSHER,
    CARBON_HERO,

    # 물
    WATER_SAVER,
    WATER_GUARDIAN,

    # 플라스틱
    PLASTIC_FIGHTER,
    PLASTIC_FREE,
    OCEAN_PROTECTOR,

    # 분리수거 게임
    SORTING_NOVICE,
    SORTING_PRO,
    SORTING_MASTER,

    # 레벨
    LEVEL_FIVE,
    LEVEL_TEN,
    LEVEL_TWENTY_FIVE,

    # 챌린지
    CHALLENGE_COMPLETER,
    CHALLENGE_CHAMPION,
)
"""기본 업적 카탈로그 (표시 순서 = 카테고리 그룹 순서)"""


# =============================================================================
# 이벤트별 트리거 배지
# =============================================================================

@dataclass(frozen=True)
class AchievementTriggerConfig:
    """도메인 이벤트별로 set_progress를 호출할 배지 목록"""

    FIRST_ACTIVITY_BADGE: str = "first_steps"
    """첫 활동 배지 (활동 수를 1로 제한해서 전달)"""

    ACTIVITY_COUNT_BADGES: Tuple[str, ...] = (
        "getting_started",
        "eco_enthusiast",
        "eco_champion",
    )
    """총 활동 수"""

    CARBON_BADGES: Tuple[str, ...] = ("carbon_cutter", "carbon_crusher", "carbon_hero")
    """총 CO₂ 절감량 (kg)"""

    WATER_BADGES: Tuple[str, ...] = ("water_saver", "water_guardian")
    """총 물 절약량 (L)"""

    PLASTIC_BADGES: Tuple[str, ...] = ("plastic_fighter", "plastic_free", "ocean_protector")
    """총 일회용 플라스틱 회피 개수"""

    STREAK_BADGES: Tuple[str, ...] = ("week_warrior", "monthly_master", "streak_legend")
    """현재 연속 기록 (일)"""

    LEVEL_BADGES: Tuple[str, ...] = ("level_five", "level_ten", "level_twenty_five")
    """현재 레벨"""

    SORTING_BADGES: Tuple[str, ...] = ("sorting_novice", "sorting_pro", "sorting_master")
    """누적 분리수거 정답 수"""

    CHALLENGE_BADGES: Tuple[str, ...] = ("challenge_completer", "challenge_champion")
    """누적 챌린지 완료 수"""


# 싱글톤 설정 객체
ACHIEVEMENT_TRIGGERS = AchievementTriggerConfig()

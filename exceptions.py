"""
EcoHero 커스텀 예외 클래스 정의

모든 예외는 EcoHeroError를 상속받아 일관된 에러 처리를 제공합니다.
"""


class EcoHeroError(Exception):
    """EcoHero 기본 예외 클래스"""

    def __init__(self, message: str = "알 수 없는 오류가 발생했습니다"):
        self.message = message
        super().__init__(self.message)


# =============================================================================
# 업적 관련 예외
# =============================================================================


class AchievementError(EcoHeroError):
    """업적 시스템 기본 예외"""
    pass


class AchievementNotFoundError(AchievementError):
    """유저 업적 레코드를 찾을 수 없음"""

    def __init__(self, badge_id: str, user_id: str):
        self.badge_id = badge_id
        self.user_id = user_id
        super().__init__(f"업적을 찾을 수 없습니다: {badge_id} (user: {user_id})")


class AchievementPersistenceError(AchievementError):
    """업적 저장소 작업 실패"""

    def __init__(self, operation: str, user_id: str):
        self.operation = operation
        self.user_id = user_id
        super().__init__(f"업적 저장에 실패했습니다: {operation} (user: {user_id})")


# =============================================================================
# 업적 카탈로그 관련 예외
# =============================================================================


class InvalidAchievementDefinitionError(AchievementError):
    """잘못된 업적 정의"""

    def __init__(self, badge_id: str, reason: str):
        self.badge_id = badge_id
        self.reason = reason
        super().__init__(f"잘못된 업적 정의입니다 ({badge_id}): {reason}")


class DuplicateBadgeError(AchievementError):
    """카탈로그 내 중복 배지 ID"""

    def __init__(self, badge_id: str):
        self.badge_id = badge_id
        super().__init__(f"중복된 배지 ID입니다: {badge_id}")

"""업적 시스템"""

from .catalog import AchievementCatalog
from .unlock_queue import UnlockQueue
from .achievement_service import AchievementService
from .achievement_tracker import AchievementProgressTracker

__all__ = [
    "AchievementCatalog",
    "UnlockQueue",
    "AchievementService",
    "AchievementProgressTracker",
]

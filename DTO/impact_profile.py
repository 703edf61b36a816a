"""
환경 영향 누적 스냅샷

활동 기록 시스템이 관리하는 누적 값을 업적 엔진에 전달할 때 사용합니다.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ImpactProfile:
    """유저의 누적 환경 영향 수치"""
    total_activities_logged: int = 0
    total_carbon_saved_kg: float = 0.0
    total_water_saved_liters: float = 0.0
    total_plastic_saved_items: int = 0

"""Configuration and constants for the stock forecast engine.

예측 기간, 경보 임계값, 출고 이동 유형 등 전역 설정을 제공합니다.
"""

from __future__ import annotations
from dataclasses import dataclass, field

# ============================================================
# 이동 유형 설정
# ============================================================

# 출고(재고 감소)로 취급하는 이동 유형 라벨 (소문자 비교)
OUTBOUND_MOVEMENT_TYPES = (
    "salida",
    "out",
    "outbound",
    "sale",
    "transfer_out",
    "adjustment_out",
)

# 표 형태 출력 시 소수점 자리수
DISPLAY_DECIMALS = 2


# ============================================================
# 예측 설정
# ============================================================

@dataclass(frozen=True)
class ForecastConfig:
    """예측 기간 관련 설정"""

    # 선택 가능한 예측 기간 (일)
    allowed_horizons: tuple[int, ...] = (7, 15, 30, 60, 90)

    # 기본 예측 기간 (일)
    default_horizon_days: int = 30

    # 예측 기간 최소값 (잘못된 입력은 이 값으로 보정)
    min_horizon_days: int = 1


@dataclass(frozen=True)
class AlertConfig:
    """품절 경보 관련 설정"""

    # 품절까지 남은 일수가 이 값보다 작으면 긴급 조치 대상
    urgent_stockout_days: int = 7

    # 품절 위험 요약에서 high 심각도로 분류하는 기준 (일)
    high_risk_days: int = 3


@dataclass(frozen=True)
class EngineConfig:
    """예측 엔진 전역 설정"""

    forecast: ForecastConfig = field(default_factory=ForecastConfig)
    alerts: AlertConfig = field(default_factory=AlertConfig)


# ============================================================
# 전역 설정 인스턴스
# ============================================================

# 전역 설정 객체 (불변)
CONFIG = EngineConfig()

"""예측 기간 동안의 일자별 재고 투영."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from ..core.config import CONFIG
from ..domain.models import ForecastPoint
from .dates import classify_stock_status

logger = logging.getLogger(__name__)


def resolve_horizon(horizon_days: object) -> int:
    """예측 기간을 정수로 바꾸고 최소값 아래로 내려가지 않게 보정합니다."""
    floor = CONFIG.forecast.min_horizon_days
    try:
        days = int(horizon_days)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        logger.warning(
            f"Invalid horizon {horizon_days!r}; using default "
            f"{CONFIG.forecast.default_horizon_days} days"
        )
        return CONFIG.forecast.default_horizon_days

    if days < floor:
        logger.warning(f"Horizon {days} is below {floor}; clamping to {floor} day(s)")
        return floor
    return days


def project_stock_levels(
    current_stock: float,
    daily_rate: float,
    horizon_days: int,
    *,
    today: pd.Timestamp,
    min_stock: Optional[float] = 0.0,
    reorder_point: Optional[float] = 0.0,
) -> tuple[ForecastPoint, ...]:
    """현재 재고에서 일정한 소비율로 줄어드는 재고를 일 단위로 투영합니다.

    - 0일차(today)는 현재 재고 그대로입니다.
    - i일차 재고 = max(0, 현재 재고 - 소비율 * i)
    - 소비율이 0이면 전 기간 현재 재고로 평탄합니다 (입고는 시뮬레이션하지 않음).

    Args:
        current_stock: 현재 보유 재고 (0 이상)
        daily_rate: 일평균 소비량 (0 이상)
        horizon_days: 예측 기간 (일)
        today: 0일차 날짜 (자정 기준)
        min_stock: 상품 최소 재고 (상태 분류용, 모든 지점에 동일하게 기록)
        reorder_point: 상품 재주문 기준 (상태 분류용, 모든 지점에 동일하게 기록)

    Returns:
        horizon_days + 1개의 ForecastPoint 튜플
    """
    horizon = resolve_horizon(horizon_days)
    start = float(current_stock)
    rate = max(0.0, float(daily_rate))
    min_value = float(min_stock or 0.0)
    reorder_value = float(reorder_point or 0.0)

    offsets = np.arange(1, horizon + 1, dtype=float)
    projected = np.concatenate(([start], np.maximum(0.0, start - rate * offsets)))
    dates = pd.date_range(pd.Timestamp(today).normalize(), periods=horizon + 1, freq="D")

    return tuple(
        ForecastPoint(
            date=day,
            projected_stock=float(stock),
            reorder_point=reorder_value,
            min_stock=min_value,
            status=classify_stock_status(float(stock), min_value, reorder_value),
        )
        for day, stock in zip(dates, projected)
    )

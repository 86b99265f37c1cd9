"""품절/재주문 일자 계산 및 재고 상태 분류."""

from __future__ import annotations

import math
from typing import Optional

import pandas as pd

from ..common.data_utils import add_days
from ..domain.models import StockStatus


def days_until_stockout(current_stock: float, daily_rate: Optional[float]) -> Optional[int]:
    """현재 재고가 소진되기까지 남은 일수.

    소비율이 없거나 0이면 품절을 예측할 수 없으므로 None을 반환합니다.
    """
    if daily_rate is None or daily_rate <= 0:
        return None
    return int(math.floor(float(current_stock) / float(daily_rate)))


def days_until_reorder(
    current_stock: float,
    daily_rate: Optional[float],
    reorder_point: Optional[float],
) -> Optional[int]:
    """재주문 기준에 도달하기까지 남은 일수.

    재주문 기준이 설정되어 있고(> 0) 소비율이 양수일 때만 계산합니다.
    이미 기준 아래라면 음수 대신 0(오늘 즉시 주문)을 반환합니다.
    """
    if not reorder_point or reorder_point <= 0:
        return None
    if daily_rate is None or daily_rate <= 0:
        return None
    days = int(math.floor((float(current_stock) - float(reorder_point)) / float(daily_rate)))
    return max(0, days)


def offset_date(today: pd.Timestamp, days: Optional[int]) -> Optional[pd.Timestamp]:
    """기준 날짜에서 days만큼 떨어진 날짜 (days가 None이면 None)."""
    if days is None:
        return None
    return add_days(today, days)


def classify_stock_status(
    stock: float,
    min_stock: Optional[float] = 0.0,
    reorder_point: Optional[float] = 0.0,
) -> StockStatus:
    """재고 수량을 상태 하나로 분류합니다 (먼저 일치하는 규칙 우선).

    1. stock <= 0 -> 품절
    2. stock <= min_stock (min_stock > 0) -> 재고 부족
    3. stock <= reorder_point (reorder_point > 0) -> 재주문 시점
    4. 그 외 -> 정상
    """
    min_value = float(min_stock or 0.0)
    reorder_value = float(reorder_point or 0.0)

    if stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if min_value > 0 and stock <= min_value:
        return StockStatus.LOW_STOCK
    if reorder_value > 0 and stock <= reorder_value:
        return StockStatus.AT_REORDER_POINT
    return StockStatus.NORMAL

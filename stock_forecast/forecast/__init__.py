"""재고 예측 모듈.

소비율 추정, 재고 투영, 품절/재주문 일자 계산과
이를 묶은 엔진 진입점(forecast_stock)을 re-export합니다.
"""

# Consumption estimation
from .consumption import estimate_daily_consumption, total_on_hand

# Stockout / reorder dates
from .dates import (
    classify_stock_status,
    days_until_reorder,
    days_until_stockout,
)

# Engine
from .engine import forecast_stock

# Projection
from .projection import project_stock_levels, resolve_horizon

__all__ = [
    "estimate_daily_consumption",
    "total_on_hand",
    "project_stock_levels",
    "resolve_horizon",
    "days_until_stockout",
    "days_until_reorder",
    "classify_stock_status",
    "forecast_stock",
]

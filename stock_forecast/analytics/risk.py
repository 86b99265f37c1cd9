"""
품절 임박 상품 감지

여러 상품의 예측 결과 중 품절까지 남은 일수가 기준 이하인 상품을 골라
심각도와 함께 정렬된 표로 반환합니다.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import numpy as np
import pandas as pd

from ..core.config import CONFIG
from ..domain.models import ForecastResult

logger = logging.getLogger(__name__)

RISK_COLUMNS = [
    "product_id",
    "current_stock",
    "daily_consumption",
    "days_left",
    "stockout_date",
    "severity",
]


def detect_stockout_risks(
    results: Mapping[str, ForecastResult],
    days_threshold: int = CONFIG.alerts.urgent_stockout_days,
    limit: Optional[int] = None,
) -> pd.DataFrame:
    """
    품절 임박 상품 감지.

    Args:
        results: 상품 ID -> 예측 결과
        days_threshold: 품절 임박 기준 (일, 이하 포함)
        limit: 반환할 최대 행 수 (None이면 전체)

    Returns:
        RISK_COLUMNS 컬럼의 DataFrame, days_left 오름차순.
        severity는 days_left <= high_risk_days이면 "high", 그 외 "medium".
    """
    rows = [
        {
            "product_id": product_id,
            "current_stock": result.current_stock,
            "daily_consumption": result.average_daily_consumption,
            "days_left": result.days_until_stockout,
            "stockout_date": result.stockout_date,
        }
        for product_id, result in results.items()
        if result.days_until_stockout is not None
        and result.days_until_stockout <= days_threshold
    ]

    if not rows:
        return pd.DataFrame(columns=RISK_COLUMNS)

    at_risk = pd.DataFrame(rows)
    at_risk["severity"] = np.where(
        at_risk["days_left"] <= CONFIG.alerts.high_risk_days, "high", "medium"
    )
    at_risk = at_risk.sort_values(
        ["days_left", "product_id"], kind="mergesort"
    ).reset_index(drop=True)

    if limit is not None:
        at_risk = at_risk.head(int(limit))

    logger.info(f"{len(at_risk)} products at stockout risk within {days_threshold} days")
    return at_risk[RISK_COLUMNS]

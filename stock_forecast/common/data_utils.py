"""공통 데이터 처리 유틸리티 함수 모듈.

여러 모듈에서 반복되는 날짜 처리 패턴을 제공합니다.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd

# 요약 테이블 빈 DataFrame 템플릿
EMPTY_SUMMARY_COLUMNS = [
    "product_id",
    "current_stock",
    "average_daily_consumption",
    "days_until_stockout",
    "stockout_date",
    "reorder_date",
    "status_today",
]


def resolve_today(today: Optional[object] = None) -> pd.Timestamp:
    """기준 날짜를 자정으로 정규화해 반환합니다.

    Args:
        today: 기준 날짜 (None이면 현재 로컬 날짜)

    Returns:
        자정으로 정규화된 Timestamp
    """
    if today is None:
        return pd.Timestamp.today().normalize()
    return pd.Timestamp(today).normalize()


def add_days(base: pd.Timestamp, days: int) -> pd.Timestamp:
    """기준 날짜에 일수를 더한 자정 Timestamp를 반환합니다."""
    return (base + pd.Timedelta(days=int(days))).normalize()


def empty_summary_frame() -> pd.DataFrame:
    """빈 예측 요약 DataFrame을 반환합니다."""
    return pd.DataFrame(columns=EMPTY_SUMMARY_COLUMNS)

"""예측 결과를 표 형태(DataFrame)로 변환하는 함수들."""

from __future__ import annotations

from typing import Mapping

import pandas as pd

from ..common.data_utils import EMPTY_SUMMARY_COLUMNS, empty_summary_frame
from ..core.config import DISPLAY_DECIMALS
from ..domain.models import ForecastResult

POINT_COLUMNS = ["date", "projected_stock", "reorder_point", "min_stock", "status"]


def forecast_points_frame(result: ForecastResult) -> pd.DataFrame:
    """예측 지점을 일자별 표로 변환합니다.

    Args:
        result: forecast_stock 결과

    Returns:
        date, projected_stock, reorder_point, min_stock, status 컬럼의 DataFrame.
        projected_stock은 소수점 둘째 자리로 반올림되고 status는 문자열 라벨입니다.
    """
    if not result.points:
        return pd.DataFrame(columns=POINT_COLUMNS)

    frame = pd.DataFrame(
        {
            "date": [p.date for p in result.points],
            "projected_stock": [p.projected_stock for p in result.points],
            "reorder_point": [p.reorder_point for p in result.points],
            "min_stock": [p.min_stock for p in result.points],
            "status": [p.status.value for p in result.points],
        }
    )
    frame["projected_stock"] = frame["projected_stock"].round(DISPLAY_DECIMALS)
    return frame


def build_forecast_summary(results: Mapping[str, ForecastResult]) -> pd.DataFrame:
    """상품별 예측 결과를 한 행씩 요약합니다.

    status_today는 0일차 지점의 상태이며, 데이터 부족 상품은 빈 값(None)입니다.
    """
    if not results:
        return empty_summary_frame()

    rows = []
    for product_id, result in results.items():
        rows.append(
            {
                "product_id": product_id,
                "current_stock": result.current_stock,
                "average_daily_consumption": result.average_daily_consumption,
                "days_until_stockout": result.days_until_stockout,
                "stockout_date": result.stockout_date,
                "reorder_date": result.reorder_date,
                "status_today": result.points[0].status.value if result.points else None,
            }
        )
    return pd.DataFrame(rows, columns=EMPTY_SUMMARY_COLUMNS)

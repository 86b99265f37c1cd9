"""예측 결과로부터 조치 권장 사항을 만듭니다."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.config import CONFIG, DISPLAY_DECIMALS
from ..domain.models import ForecastResult

URGENT = "urgent"
REORDER = "reorder"
CONSUMPTION = "consumption"


@dataclass(frozen=True)
class Recommendation:
    """권장 사항 한 건 (kind: urgent / reorder / consumption)."""

    kind: str
    message: str


def build_recommendations(result: ForecastResult) -> list[Recommendation]:
    """
    예측 결과에 맞는 권장 사항 목록을 반환합니다.

    - urgent: 품절까지 남은 일수가 CONFIG.alerts.urgent_stockout_days 미만
    - reorder: 재주문 권장일이 오늘이거나 이미 지남
    - consumption: 일평균 소비량이 0보다 큼 (정보성)

    데이터 부족 결과(points 없음)에는 빈 리스트를 반환합니다.

    Args:
        result: forecast_stock 결과

    Returns:
        Recommendation 리스트 (urgent, reorder, consumption 순)
    """
    if not result.has_forecast:
        return []

    items: list[Recommendation] = []

    days_left = result.days_until_stockout
    if days_left is not None and days_left < CONFIG.alerts.urgent_stockout_days:
        items.append(
            Recommendation(
                kind=URGENT,
                message=(
                    f"Urgent action: stock runs out in {days_left} days. "
                    "Place an order immediately."
                ),
            )
        )

    if result.reorder_due:
        items.append(
            Recommendation(
                kind=REORDER,
                message=(
                    "Reorder point reached: place a new order now to avoid "
                    "running out of stock."
                ),
            )
        )

    rate = result.average_daily_consumption
    if rate is not None and rate > 0:
        items.append(
            Recommendation(
                kind=CONSUMPTION,
                message=(
                    f"Daily consumption: this product averages "
                    f"{rate:.{DISPLAY_DECIMALS}f} units per day."
                ),
            )
        )

    return items

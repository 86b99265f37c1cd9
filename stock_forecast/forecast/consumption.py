"""일평균 소비량 추정 및 현재 보유 재고 집계.

과거 출고 이동으로부터 단순 평균 소비율을 계산합니다.
최근 데이터 가중치나 계절성 보정은 적용하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..domain.models import OutboundMovement, StockRecord

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def total_on_hand(
    stock_records: Iterable[StockRecord],
    product_id: Optional[str] = None,
) -> float:
    """보관 구역별 재고를 합산해 현재 보유 재고를 구합니다.

    Args:
        stock_records: 재고 원장 레코드
        product_id: 지정하면 해당 상품의 레코드만 합산

    Returns:
        재고 수량 합계 (레코드가 없으면 0)
    """
    return float(
        sum(
            float(rec.quantity or 0.0)
            for rec in stock_records
            if product_id is None or str(rec.product_id) == str(product_id)
        )
    )


def observed_span_days(movements: Sequence[OutboundMovement]) -> float:
    """첫 이동과 마지막 이동 사이의 경과 일수 (최소 1일)."""
    dates = [m.date for m in movements]
    elapsed = (max(dates) - min(dates)).total_seconds() / SECONDS_PER_DAY
    return max(1.0, elapsed)


def estimate_daily_consumption(
    movements: Sequence[OutboundMovement],
) -> Optional[float]:
    """과거 출고 이동으로부터 일평균 소비율을 추정합니다.

    소비율 = 출고 수량 합계 / 관측 기간(일). 관측 기간은 첫 이동과
    마지막 이동 사이의 경과 일수이며 1일보다 짧으면 1일로 봅니다
    (이동이 한 건뿐이어도 0으로 나누지 않음).

    Args:
        movements: 한 상품의 출고 이동 (날짜 오름차순)

    Returns:
        일평균 소비량. 이동이 없으면 None (데이터 부족).

    Examples:
        >>> moves = [OutboundMovement("P1", 10, pd.Timestamp("2024-01-01"))]
        >>> estimate_daily_consumption(moves)
        10.0
    """
    if not movements:
        logger.debug("No outbound movements; consumption rate is undetermined")
        return None

    total = sum(float(m.quantity) for m in movements)
    span_days = observed_span_days(movements)
    rate = total / span_days

    logger.debug(
        f"Consumption rate {rate:.4f}/day from {len(movements)} movements "
        f"over {span_days:.2f} days"
    )
    return rate

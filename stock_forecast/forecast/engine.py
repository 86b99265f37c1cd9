"""재고 예측 엔진 진입점.

소비율 추정 -> 재고 투영 -> 품절/재주문 일자 계산을 한 번에 수행합니다.
입력 스냅샷만으로 계산하는 순수 함수이며, 같은 입력이면 항상 같은 결과를 돌려줍니다.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..common.data_utils import resolve_today
from ..core.config import CONFIG
from ..domain.models import ForecastResult, OutboundMovement, Product, StockRecord
from .consumption import estimate_daily_consumption, total_on_hand
from .dates import days_until_reorder, days_until_stockout, offset_date
from .projection import project_stock_levels, resolve_horizon

logger = logging.getLogger(__name__)


def forecast_stock(
    product: Product,
    movements: Sequence[OutboundMovement],
    *,
    current_stock: Optional[float] = None,
    stock_records: Optional[Iterable[StockRecord]] = None,
    horizon_days: int = CONFIG.forecast.default_horizon_days,
    today: Optional[object] = None,
) -> ForecastResult:
    """한 상품의 재고 예측을 수행합니다.

    이 함수는 다음 단계로 예측을 수행합니다:
    1. 현재 보유 재고 결정 (current_stock 또는 stock_records 합계)
    2. 출고 이동으로부터 일평균 소비율 추정
    3. 예측 기간 동안 일자별 재고 투영 (0일차 포함 horizon_days + 1개 지점)
    4. 예상 품절일과 재주문 권장일 계산

    이동 이력이 없으면 예외 대신 points가 비어 있고 소비율/날짜가 None인
    결과를 반환합니다 (데이터 부족 상태).

    Args:
        product: 대상 상품 (min_stock, reorder_point 사용)
        movements: 해당 상품의 출고 이동 (날짜 오름차순)
        current_stock: 이미 합산된 현재 재고. None이면 stock_records를 합산
        stock_records: 보관 구역별 재고 레코드 (다른 상품의 레코드는 무시)
        horizon_days: 예측 기간 (일, 1 미만은 1로 보정)
        today: 0일차 기준 날짜 (None이면 오늘)

    Returns:
        ForecastResult

    Examples:
        >>> result = forecast_stock(
        ...     Product(id="P1", reorder_point=30),
        ...     movements,
        ...     current_stock=100,
        ...     horizon_days=30,
        ... )
        >>> result.days_until_stockout
    """
    base_date = resolve_today(today)
    horizon = resolve_horizon(horizon_days)

    if current_stock is not None:
        on_hand = float(current_stock)
    elif stock_records is not None:
        on_hand = total_on_hand(stock_records, product_id=product.id)
    else:
        on_hand = 0.0

    rate = estimate_daily_consumption(movements)
    if rate is None:
        logger.debug(f"Insufficient movement data for product {product.id}")
        return ForecastResult(
            product_id=product.id,
            current_stock=on_hand,
            horizon_days=horizon,
            today=base_date,
        )

    points = project_stock_levels(
        on_hand,
        rate,
        horizon,
        today=base_date,
        min_stock=product.min_stock_value,
        reorder_point=product.reorder_point_value,
    )

    stockout_days = days_until_stockout(on_hand, rate)
    reorder_days = days_until_reorder(on_hand, rate, product.reorder_point_value)

    logger.debug(
        f"Forecast for {product.id}: stock={on_hand}, rate={rate:.4f}, "
        f"stockout_days={stockout_days}, reorder_days={reorder_days}"
    )

    return ForecastResult(
        product_id=product.id,
        current_stock=on_hand,
        horizon_days=horizon,
        today=base_date,
        points=points,
        average_daily_consumption=rate,
        days_until_stockout=stockout_days,
        stockout_date=offset_date(base_date, stockout_days),
        reorder_date=offset_date(base_date, reorder_days),
    )

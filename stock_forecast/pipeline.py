"""End-to-end orchestration helpers for forecasting every product in a catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd

from .analytics.tables import build_forecast_summary
from .common.data_utils import resolve_today
from .common.performance import measure_time
from .core.config import CONFIG
from .data_sources.loader import Loader
from .domain.models import ForecastResult
from .domain.normalization import (
    movements_from_frame,
    normalize_movements,
    normalize_products,
    normalize_stock_records,
    products_from_frame,
)
from .domain.validation import validate_forecast_tables
from .forecast.engine import forecast_stock

logger = logging.getLogger(__name__)

__all__ = [
    "ForecastInputs",
    "load_inputs",
    "run_forecasts",
    "build_forecast_summary",
]


@dataclass(frozen=True)
class ForecastInputs:
    products: pd.DataFrame
    stocks: pd.DataFrame
    movements: pd.DataFrame


def load_inputs(products: Loader, stocks: Loader, movements: Loader) -> ForecastInputs:
    """세 로더에서 원본 테이블을 읽어 ForecastInputs로 묶습니다."""
    return ForecastInputs(
        products=products.load(),
        stocks=stocks.load(),
        movements=movements.load(),
    )


@measure_time
def run_forecasts(
    inputs: ForecastInputs,
    *,
    horizon_days: int = CONFIG.forecast.default_horizon_days,
    today: Optional[object] = None,
    product_ids: Optional[Iterable[str]] = None,
) -> dict[str, ForecastResult]:
    """
    카탈로그의 상품별로 재고 예측을 실행합니다.

    처리 단계:
    1. 입력 테이블 구조 검증 (ValidationError)
    2. 상품/재고/이동 테이블 정규화 (출고 이동만 유지)
    3. 상품별 재고 합계와 출고 이동 묶기
    4. 상품마다 forecast_stock 호출

    Args:
        inputs: 원본 상품/재고/이동 테이블
        horizon_days: 예측 기간 (일)
        today: 0일차 기준 날짜 (None이면 오늘, 모든 상품에 동일하게 적용)
        product_ids: 지정하면 해당 상품만 예측

    Returns:
        상품 ID -> ForecastResult (카탈로그 순서 유지)

    Raises:
        ValidationError: 입력 테이블 구조가 잘못된 경우
    """
    validate_forecast_tables(inputs.products, inputs.stocks, inputs.movements)

    base_date = resolve_today(today)
    products = normalize_products(inputs.products)
    stocks = normalize_stock_records(inputs.stocks)
    movements = normalize_movements(inputs.movements)

    if product_ids is not None:
        wanted = {str(pid).strip() for pid in product_ids}
        products = products[products["product_id"].isin(wanted)]

    logger.info(
        f"Forecasting {len(products)} products over {horizon_days} days "
        f"from {base_date.date()} ({len(stocks)} stock rows, {len(movements)} outbound moves)"
    )

    on_hand = stocks.groupby("product_id")["quantity"].sum()
    moves_by_product = {
        str(pid): grp for pid, grp in movements.groupby("product_id", sort=False)
    }

    results: dict[str, ForecastResult] = {}
    for product in products_from_frame(products):
        product_moves = moves_by_product.get(product.id)
        moves = movements_from_frame(product_moves) if product_moves is not None else []
        results[product.id] = forecast_stock(
            product,
            moves,
            current_stock=float(on_hand.get(product.id, 0.0)),
            horizon_days=horizon_days,
            today=base_date,
        )

    insufficient = sum(1 for r in results.values() if not r.has_forecast)
    if insufficient:
        logger.warning(f"{insufficient} products have no outbound history to forecast")

    return results

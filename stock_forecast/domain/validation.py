"""
입력 테이블 검증 로직

일괄 예측을 실행하기 전에 상품/재고/이동 테이블의 구조를 검증합니다.
컬럼명은 정규화 모듈의 별칭 규칙으로 찾기 때문에 원본 테이블을 그대로 넘기면 됩니다.
"""

from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from .exceptions import ValidationError
from .normalization import (
    MOVEMENT_COLUMN_ALIASES,
    PRODUCT_COLUMN_ALIASES,
    STOCK_COLUMN_ALIASES,
    resolve_columns,
)

logger = logging.getLogger(__name__)

REQUIRED_PRODUCT_COLUMNS = ("product_id",)
REQUIRED_STOCK_COLUMNS = ("product_id", "quantity")
REQUIRED_MOVEMENT_COLUMNS = ("product_id", "quantity", "date")


def _check_table(
    frame: object,
    label: str,
    aliases: dict[str, Sequence[str]],
    required: Sequence[str],
) -> None:
    if not isinstance(frame, pd.DataFrame):
        logger.error(f"{label} is not a DataFrame: {type(frame)}")
        raise ValidationError(f"{label} data is not a table; reload the source file.")

    resolved = resolve_columns(frame.columns, aliases)
    missing = [col for col in required if col not in resolved]
    if missing:
        logger.error(f"Missing {label} columns: {missing}")
        raise ValidationError(
            f"{label} data is missing required columns: " + ", ".join(sorted(missing))
        )


def validate_forecast_tables(
    products: object,
    stocks: object,
    movements: object,
) -> None:
    """
    일괄 예측에 필요한 입력 테이블의 구조적 정합성을 검증합니다.

    검증 항목:
    1. 세 입력 모두 DataFrame인지 확인
    2. 필수 컬럼(별칭 포함) 존재 여부 확인
       - products: product_id
       - stocks: product_id, quantity
       - movements: product_id, quantity, date

    Args:
        products: 상품 카탈로그 테이블
        stocks: 재고 원장 테이블
        movements: 이동 로그 테이블

    Raises:
        ValidationError: 검증 실패 시 발생
    """
    logger.debug("Validating forecast input tables")

    _check_table(products, "Product", PRODUCT_COLUMN_ALIASES, REQUIRED_PRODUCT_COLUMNS)
    _check_table(stocks, "Stock", STOCK_COLUMN_ALIASES, REQUIRED_STOCK_COLUMNS)
    _check_table(movements, "Movement", MOVEMENT_COLUMN_ALIASES, REQUIRED_MOVEMENT_COLUMNS)

    logger.debug("Forecast input tables validation passed")

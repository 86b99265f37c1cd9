"""
도메인 계층 퍼블릭 API

이 모듈은 도메인 계층의 주요 클래스와 함수를 재수출하여
일관된 퍼블릭 API를 제공합니다.
"""
from __future__ import annotations

from .exceptions import DataLoadError, DomainError, ValidationError
from .models import (
    ForecastPoint,
    ForecastResult,
    OutboundMovement,
    Product,
    StockRecord,
    StockStatus,
)
from .normalization import (
    movements_from_frame,
    normalize_movements,
    normalize_products,
    normalize_stock_records,
    products_from_frame,
    resolve_columns,
    stock_records_from_frame,
)
from .validation import validate_forecast_tables

__all__ = [
    # 예외
    "DomainError",
    "ValidationError",
    "DataLoadError",
    # 모델
    "Product",
    "StockRecord",
    "OutboundMovement",
    "ForecastPoint",
    "ForecastResult",
    "StockStatus",
    # 정규화
    "resolve_columns",
    "normalize_products",
    "normalize_stock_records",
    "normalize_movements",
    "products_from_frame",
    "stock_records_from_frame",
    "movements_from_frame",
    # 검증
    "validate_forecast_tables",
]

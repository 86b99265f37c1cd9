"""
도메인 모델: 재고 예측 엔진의 핵심 데이터 구조

상품 카탈로그, 재고 원장, 이동 로그에서 넘어오는 입력과
엔진이 만들어내는 예측 결과를 정의합니다.
모든 모델은 불변(frozen) 데이터클래스로 구현되어 안전한 데이터 전달을 보장합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pandas as pd


class StockStatus(str, Enum):
    """예측 지점별 재고 상태 (우선순위 순서대로 선언)."""

    OUT_OF_STOCK = "out of stock"
    LOW_STOCK = "low stock"
    AT_REORDER_POINT = "at reorder point"
    NORMAL = "normal"


@dataclass(frozen=True)
class Product:
    """
    상품 카탈로그 레코드.

    Attributes:
        id: 상품 식별자
        name: 상품명
        min_stock: 재고 부족 경보 기준 (0이면 미설정)
        reorder_point: 재주문 기준 (0이면 미설정)
    """

    id: str
    name: str = ""
    min_stock: Optional[float] = 0.0
    reorder_point: Optional[float] = 0.0

    @property
    def min_stock_value(self) -> float:
        """미설정(None) 값을 0으로 바꾼 최소 재고."""
        return float(self.min_stock or 0.0)

    @property
    def reorder_point_value(self) -> float:
        """미설정(None) 값을 0으로 바꾼 재주문 기준."""
        return float(self.reorder_point or 0.0)


@dataclass(frozen=True)
class StockRecord:
    """보관 구역(area) 하나에 있는 상품 재고."""

    product_id: str
    area_id: str
    quantity: float


@dataclass(frozen=True)
class OutboundMovement:
    """과거 출고 이동 한 건 (판매, 이동 출고, 조정 출고 등)."""

    product_id: str
    quantity: float
    date: pd.Timestamp


@dataclass(frozen=True)
class ForecastPoint:
    """
    예측 기간의 하루치 재고 투영값.

    Attributes:
        date: 예측 날짜 (자정 기준)
        projected_stock: 투영 재고 (0 이상)
        reorder_point: 상품의 재주문 기준 (모든 지점에서 동일)
        min_stock: 상품의 최소 재고 (모든 지점에서 동일)
        status: 해당 일자의 재고 상태
    """

    date: pd.Timestamp
    projected_stock: float
    reorder_point: float
    min_stock: float
    status: StockStatus


@dataclass(frozen=True)
class ForecastResult:
    """
    한 상품에 대한 예측 실행 결과.

    이동 이력이 없으면 points가 비어 있고 소비율/날짜 값은 모두 None입니다.

    Attributes:
        product_id: 상품 식별자
        current_stock: 예측에 사용한 현재 보유 재고
        horizon_days: 예측 기간 (일)
        today: 기준 날짜 (0일차)
        points: 0일차부터 horizon_days일차까지의 예측 지점 (불변 튜플)
        average_daily_consumption: 일평균 소비량 (데이터 부족 시 None)
        days_until_stockout: 품절까지 남은 일수 (판단 불가 시 None)
        stockout_date: 예상 품절일
        reorder_date: 재주문 권장일
    """

    product_id: str
    current_stock: float
    horizon_days: int
    today: pd.Timestamp
    points: tuple[ForecastPoint, ...] = ()
    average_daily_consumption: Optional[float] = None
    days_until_stockout: Optional[int] = None
    stockout_date: Optional[pd.Timestamp] = None
    reorder_date: Optional[pd.Timestamp] = None

    @property
    def has_forecast(self) -> bool:
        """예측 지점이 만들어졌는지 여부 (False면 데이터 부족 상태)."""
        return bool(self.points)

    @property
    def reorder_due(self) -> bool:
        """재주문 권장일이 오늘이거나 이미 지났는지 여부."""
        return self.reorder_date is not None and self.reorder_date <= self.today

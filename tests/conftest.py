import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stock_forecast.domain.models import OutboundMovement, Product


@pytest.fixture
def today() -> pd.Timestamp:
    """모든 테스트에서 사용하는 고정 기준 날짜"""
    return pd.Timestamp("2024-03-01")


@pytest.fixture
def product() -> Product:
    """최소 재고/재주문 기준이 설정된 상품"""
    return Product(id="P1", name="Café molido 500g", min_stock=10, reorder_point=30)


@pytest.fixture
def make_moves():
    """(날짜 문자열, 수량) 쌍으로 출고 이동 리스트를 만드는 팩토리"""

    def _make(*pairs, product_id: str = "P1") -> list[OutboundMovement]:
        return [
            OutboundMovement(product_id=product_id, quantity=qty, date=pd.Timestamp(day))
            for day, qty in pairs
        ]

    return _make

"""
데이터 정규화 유틸리티

상품 카탈로그, 재고 원장, 이동 로그에서 넘어온 원본 테이블의
컬럼명과 타입을 표준화하는 함수들을 제공합니다.
정규화가 끝난 테이블은 도메인 모델 리스트로 변환할 수 있습니다.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import pandas as pd

from ..core.config import OUTBOUND_MOVEMENT_TYPES
from .models import OutboundMovement, Product, StockRecord

logger = logging.getLogger(__name__)


# Column aliases observed in catalog / ledger exports. Lookups ignore case
# and the separators "_", "-" and " ", so ``productId`` matches ``product_id``.
PRODUCT_COLUMN_ALIASES: dict[str, Sequence[str]] = {
    "product_id": ("product_id", "id", "_id", "producto", "sku"),
    "name": ("name", "nombre", "product_name"),
    "min_stock": ("min_stock", "minimum_stock", "stock_minimo"),
    "reorder_point": ("reorder_point", "punto_reorden", "punto_de_reorden"),
}

STOCK_COLUMN_ALIASES: dict[str, Sequence[str]] = {
    "product_id": ("product_id", "producto", "sku"),
    "area_id": ("area_id", "area", "bodega", "warehouse_id", "warehouse"),
    "quantity": ("quantity", "qty", "cantidad", "stock"),
}

MOVEMENT_COLUMN_ALIASES: dict[str, Sequence[str]] = {
    "product_id": ("product_id", "producto", "sku"),
    "quantity": ("quantity", "qty", "cantidad"),
    "date": ("date", "fecha", "created_at", "timestamp"),
    "type": ("type", "tipo", "movement_type", "move_type"),
}

PRODUCT_COLUMNS = ["product_id", "name", "min_stock", "reorder_point"]
STOCK_COLUMNS = ["product_id", "area_id", "quantity"]
MOVEMENT_COLUMNS = ["product_id", "quantity", "date", "type"]


def _column_key(name: object) -> str:
    """Return the comparison key used for alias lookups."""

    text = str(name).strip().casefold()
    for sep in ("_", "-", " "):
        text = text.replace(sep, "")
    return text


def resolve_columns(
    columns: Iterable[object], aliases: dict[str, Sequence[str]]
) -> dict[str, str]:
    """
    원본 컬럼명 목록에서 표준 컬럼명에 해당하는 원본 컬럼을 찾습니다.

    Args:
        columns: 원본 데이터프레임의 컬럼 목록
        aliases: 표준 컬럼명 -> 별칭 목록 매핑

    Returns:
        표준 컬럼명 -> 원본 컬럼명 매핑 (찾지 못한 표준 컬럼은 제외)

    Examples:
        >>> resolve_columns(["productId", "cantidad"], STOCK_COLUMN_ALIASES)
        {'product_id': 'productId', 'quantity': 'cantidad'}
    """
    lookup: dict[str, str] = {}
    for col in columns:
        key = _column_key(col)
        if key and key not in lookup:
            lookup[key] = str(col)

    resolved: dict[str, str] = {}
    consumed: set[str] = set()
    for canonical, names in aliases.items():
        for alias in names:
            found = lookup.get(_column_key(alias))
            if found is not None and found not in consumed:
                resolved[canonical] = found
                consumed.add(found)
                break
    return resolved


def _standardize(
    frame: pd.DataFrame, aliases: dict[str, Sequence[str]]
) -> pd.DataFrame:
    """Rename aliased columns to their canonical names."""

    resolved = resolve_columns(frame.columns, aliases)
    rename_map = {orig: canonical for canonical, orig in resolved.items()}
    # 원본 라벨이 문자열이 아닐 수 있으므로 str 기준으로 다시 매핑
    out = frame.copy()
    out.columns = [str(c) for c in out.columns]
    return out.rename(columns=rename_map)


def _to_number(series: pd.Series) -> pd.Series:
    """Coerce a column to floats, dropping thousands separators."""

    return pd.to_numeric(
        series.astype(str).str.replace(",", "", regex=False).str.strip(),
        errors="coerce",
    )


def _to_id(series: pd.Series) -> pd.Series:
    """Coerce identifiers to trimmed strings with empty values as ''.

    A numeric id column with a blank cell is read as floats, so whole-number
    floats are written back as integers (``1.0`` -> ``"1"``).
    """

    def _clean(value: object) -> str:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return ""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        text = str(value).strip()
        if text.lower() in {"nan", "none", "null", "<na>"}:
            return ""
        return text

    return series.map(_clean)


def _to_naive_datetime(series: pd.Series) -> pd.Series:
    """Parse dates to naive UTC timestamps; offsets may differ row to row."""

    parsed = pd.to_datetime(series, errors="coerce", utc=True)
    return parsed.dt.tz_convert(None)


def _column_or(out: pd.DataFrame, name: str, default: object) -> pd.Series:
    if name in out.columns:
        return out[name]
    return pd.Series(default, index=out.index)


def normalize_products(frame: pd.DataFrame) -> pd.DataFrame:
    """
    상품 카탈로그 테이블을 표준 스키마로 변환합니다.

    표준 스키마:
    - product_id: 상품 식별자 (문자열)
    - name: 상품명 (문자열)
    - min_stock: 최소 재고 (숫자, 미설정은 0)
    - reorder_point: 재주문 기준 (숫자, 미설정은 0)

    Args:
        frame: 원본 상품 데이터프레임

    Returns:
        정규화된 상품 데이터프레임 (식별자가 없는 행은 제거)
    """
    out = _standardize(frame, PRODUCT_COLUMN_ALIASES)

    out["product_id"] = _to_id(_column_or(out, "product_id", ""))
    out["name"] = _to_id(_column_or(out, "name", ""))
    out["min_stock"] = _to_number(_column_or(out, "min_stock", 0)).fillna(0.0)
    out["reorder_point"] = _to_number(_column_or(out, "reorder_point", 0)).fillna(0.0)

    out = out[out["product_id"] != ""]
    return out[PRODUCT_COLUMNS].drop_duplicates(subset=["product_id"]).reset_index(drop=True)


def normalize_stock_records(frame: pd.DataFrame) -> pd.DataFrame:
    """
    재고 원장 테이블(상품 x 보관 구역)을 표준 스키마로 변환합니다.

    표준 스키마:
    - product_id: 상품 식별자 (문자열)
    - area_id: 보관 구역 식별자 (문자열, 없으면 빈 문자열)
    - quantity: 재고 수량 (숫자, 변환 실패 시 0)

    Args:
        frame: 원본 재고 데이터프레임

    Returns:
        정규화된 재고 데이터프레임
    """
    out = _standardize(frame, STOCK_COLUMN_ALIASES)

    out["product_id"] = _to_id(_column_or(out, "product_id", ""))
    out["area_id"] = _to_id(_column_or(out, "area_id", ""))
    out["quantity"] = _to_number(_column_or(out, "quantity", 0)).fillna(0.0)

    out = out[out["product_id"] != ""]
    return out[STOCK_COLUMNS].reset_index(drop=True)


def normalize_movements(
    frame: pd.DataFrame,
    *,
    outbound_types: Optional[Iterable[str]] = OUTBOUND_MOVEMENT_TYPES,
) -> pd.DataFrame:
    """
    이동 로그를 출고 이동만 남긴 표준 스키마로 변환합니다.

    - type 컬럼이 있으면 outbound_types에 해당하는 행만 남깁니다 (대소문자 무시).
      outbound_types가 None이면 유형 필터를 적용하지 않습니다.
    - 날짜를 해석할 수 없거나 수량이 0 이하인 행은 제거합니다.
    - 날짜는 시각 정보를 유지합니다 (경과 일수 계산에 사용).
      UTC 오프셋이 있는 날짜는 UTC로 변환한 뒤 시간대 정보를 제거합니다.
    - 상품별, 날짜 오름차순으로 정렬됩니다.

    Args:
        frame: 원본 이동 로그 데이터프레임
        outbound_types: 출고로 취급할 이동 유형 라벨

    Returns:
        product_id, quantity, date, type 컬럼의 데이터프레임
    """
    out = _standardize(frame, MOVEMENT_COLUMN_ALIASES)
    total = len(out)

    out["product_id"] = _to_id(_column_or(out, "product_id", ""))
    out["quantity"] = _to_number(_column_or(out, "quantity", 0))
    out["date"] = _to_naive_datetime(_column_or(out, "date", pd.NaT))
    has_type = "type" in out.columns
    out["type"] = _to_id(_column_or(out, "type", "")).astype(str).str.lower()

    if has_type and outbound_types is not None:
        allowed = {str(t).strip().lower() for t in outbound_types}
        out = out[out["type"].isin(allowed)]

    out = out[(out["product_id"] != "") & out["date"].notna() & (out["quantity"] > 0)]

    dropped = total - len(out)
    if dropped:
        logger.debug(f"Dropped {dropped} of {total} movement rows (non-outbound or invalid)")

    out = out.sort_values(["product_id", "date"], kind="mergesort")
    return out[MOVEMENT_COLUMNS].reset_index(drop=True)


# ============================================================
# 데이터프레임 -> 도메인 모델 변환
# ============================================================

def products_from_frame(frame: pd.DataFrame) -> list[Product]:
    """정규화된 상품 테이블을 Product 리스트로 변환합니다."""
    return [
        Product(
            id=str(row.product_id),
            name=str(row.name),
            min_stock=float(row.min_stock),
            reorder_point=float(row.reorder_point),
        )
        for row in frame.itertuples(index=False)
    ]


def stock_records_from_frame(frame: pd.DataFrame) -> list[StockRecord]:
    """정규화된 재고 테이블을 StockRecord 리스트로 변환합니다."""
    return [
        StockRecord(
            product_id=str(row.product_id),
            area_id=str(row.area_id),
            quantity=float(row.quantity),
        )
        for row in frame.itertuples(index=False)
    ]


def movements_from_frame(frame: pd.DataFrame) -> list[OutboundMovement]:
    """정규화된 이동 로그를 OutboundMovement 리스트로 변환합니다."""
    return [
        OutboundMovement(
            product_id=str(row.product_id),
            quantity=float(row.quantity),
            date=pd.Timestamp(row.date),
        )
        for row in frame.itertuples(index=False)
    ]

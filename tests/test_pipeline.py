"""
일괄 예측 파이프라인 테스트

원본 테이블 -> 검증 -> 정규화 -> 상품별 예측 흐름과
파일 로더, 일괄 실행 스크립트를 검증합니다.
"""
from __future__ import annotations

import pandas as pd
import pytest

import forecast_batch
from stock_forecast.data_sources import FileLoader, StaticFrameLoader
from stock_forecast.domain.exceptions import DataLoadError, ValidationError
from stock_forecast.domain.models import StockStatus
from stock_forecast.pipeline import (
    ForecastInputs,
    build_forecast_summary,
    load_inputs,
    run_forecasts,
)


@pytest.fixture
def products_df() -> pd.DataFrame:
    return pd.DataFrame({
        "id": ["P1", "P2", "P3"],
        "name": ["Arroz 1kg", "Aceite 1L", "Sal 500g"],
        "minStock": [10, 0, 5],
        "reorderPoint": [30, 0, 30],
    })


@pytest.fixture
def stocks_df() -> pd.DataFrame:
    return pd.DataFrame({
        "productId": ["P1", "P1", "P2", "P3"],
        "areaId": ["A1", "A2", "A1", "A1"],
        "quantity": [60, 40, 15, 20],
    })


@pytest.fixture
def movements_df() -> pd.DataFrame:
    return pd.DataFrame({
        "productId": ["P1", "P1", "P1", "P2", "P3"],
        "type": ["salida", "entrada", "salida", "entrada", "salida"],
        "quantity": [20, 500, 80, 30, 5],
        "date": ["2024-02-01", "2024-02-03", "2024-02-11", "2024-02-10", "2024-02-28"],
    })


@pytest.fixture
def inputs(products_df, stocks_df, movements_df) -> ForecastInputs:
    return ForecastInputs(products=products_df, stocks=stocks_df, movements=movements_df)


# ============================================================
# run_forecasts
# ============================================================

def test_run_forecasts_per_product(inputs, today):
    """상품별 재고 합계와 출고 이동만으로 예측"""
    results = run_forecasts(inputs, horizon_days=30, today=today)

    assert list(results) == ["P1", "P2", "P3"]

    p1 = results["P1"]
    assert p1.current_stock == 100
    assert p1.average_daily_consumption == pytest.approx(10.0)
    assert p1.days_until_stockout == 10
    assert p1.stockout_date == pd.Timestamp("2024-03-11")
    assert p1.reorder_date == pd.Timestamp("2024-03-08")
    assert len(p1.points) == 31


def test_run_forecasts_without_outbound_history(inputs, today):
    """입고만 있는 상품 - 데이터 부족 결과"""
    results = run_forecasts(inputs, horizon_days=30, today=today)

    p2 = results["P2"]
    assert not p2.has_forecast
    assert p2.current_stock == 15
    assert p2.average_daily_consumption is None


def test_run_forecasts_below_reorder_point(inputs, today):
    """재주문 기준 아래 상품 - 재주문일은 오늘, 0일차 상태는 재주문 시점"""
    results = run_forecasts(inputs, horizon_days=7, today="2024-03-01")

    p3 = results["P3"]
    assert p3.reorder_date == today
    assert p3.points[0].status == StockStatus.AT_REORDER_POINT
    assert p3.days_until_stockout == 4


def test_run_forecasts_product_filter(inputs, today):
    """product_ids 지정 시 해당 상품만 예측"""
    results = run_forecasts(inputs, horizon_days=7, today=today, product_ids=["P3"])

    assert list(results) == ["P3"]


def test_run_forecasts_product_without_stock_rows(inputs, today):
    """재고 레코드가 없는 상품 - 현재 재고 0"""
    products = pd.concat(
        [inputs.products, pd.DataFrame({"id": ["P9"], "name": ["Nuevo"]})],
        ignore_index=True,
    )
    results = run_forecasts(
        ForecastInputs(products=products, stocks=inputs.stocks, movements=inputs.movements),
        horizon_days=7,
        today=today,
    )

    assert results["P9"].current_stock == 0
    assert not results["P9"].has_forecast


def test_run_forecasts_validates_tables(products_df, movements_df, today):
    """재고 테이블에 수량 컬럼 누락 - ValidationError"""
    bad = ForecastInputs(
        products=products_df,
        stocks=pd.DataFrame({"productId": ["P1"]}),
        movements=movements_df,
    )

    with pytest.raises(ValidationError):
        run_forecasts(bad, today=today)


def test_summary_from_pipeline(inputs, today):
    """파이프라인 결과 요약"""
    summary = build_forecast_summary(run_forecasts(inputs, horizon_days=7, today=today))

    assert summary["product_id"].tolist() == ["P1", "P2", "P3"]
    assert summary.set_index("product_id").loc["P1", "status_today"] == "normal"


def test_run_forecasts_mixed_utc_offsets(products_df, stocks_df, today):
    """이동 날짜의 UTC 오프셋이 섞여도 예측 (5.25일 동안 42개 출고)"""
    movements = pd.DataFrame({
        "productId": ["P1", "P1"],
        "type": ["salida", "salida"],
        "quantity": [21, 21],
        "date": ["2024-02-01T00:00:00+01:00", "2024-02-05T00:00:00-05:00"],
    })
    inputs = ForecastInputs(products=products_df, stocks=stocks_df, movements=movements)

    results = run_forecasts(inputs, horizon_days=7, today=today)

    assert results["P1"].average_daily_consumption == pytest.approx(8.0)
    assert results["P1"].days_until_stockout == 12


# ============================================================
# 로더
# ============================================================

def test_static_frame_loader_returns_copy(products_df):
    """StaticFrameLoader는 복사본 반환"""
    loaded = StaticFrameLoader(products_df).load()
    loaded.loc[0, "id"] = "X"

    assert products_df.loc[0, "id"] == "P1"


def test_load_inputs_from_csv(tmp_path, products_df, stocks_df, movements_df, today):
    """CSV 파일에서 입력 테이블 로드 후 예측"""
    paths = {}
    for name, frame in {"products": products_df, "stocks": stocks_df, "movements": movements_df}.items():
        path = tmp_path / f"{name}.csv"
        frame.to_csv(path, index=False)
        paths[name] = path

    inputs = load_inputs(
        FileLoader(paths["products"]),
        FileLoader(paths["stocks"]),
        FileLoader(paths["movements"]),
    )
    results = run_forecasts(inputs, horizon_days=7, today=today)

    assert results["P1"].days_until_stockout == 10


def test_file_loader_missing_file(tmp_path):
    """존재하지 않는 파일 - DataLoadError"""
    with pytest.raises(DataLoadError):
        FileLoader(tmp_path / "missing.csv").load()


def test_file_loader_empty_file(tmp_path):
    """빈 CSV - DataLoadError"""
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(DataLoadError):
        FileLoader(path).load()


def test_csv_ids_with_blank_cell_still_match_catalog(tmp_path, today):
    """식별자 칸이 빈 CSV - 실수로 읽힌 ID도 카탈로그와 매칭"""
    products = tmp_path / "products.csv"
    products.write_text("id,name,minStock,reorderPoint\n1,Arroz 1kg,10,30\n2,Sal 500g,0,0\n")
    stocks = tmp_path / "stocks.csv"
    stocks.write_text("product_id,area_id,quantity\n1,A1,60\n1,A2,40\n,A3,5\n")
    movements = tmp_path / "movements.csv"
    movements.write_text(
        "product_id,type,quantity,date\n"
        "1,salida,20,2024-02-01\n"
        "1,salida,80,2024-02-11\n"
        ",salida,1,2024-02-11\n"
    )

    inputs = load_inputs(FileLoader(products), FileLoader(stocks), FileLoader(movements))
    results = run_forecasts(inputs, horizon_days=7, today=today)

    assert list(results) == ["1", "2"]
    assert results["1"].current_stock == 100
    assert results["1"].average_daily_consumption == pytest.approx(10.0)
    assert results["1"].days_until_stockout == 10
    assert not results["2"].has_forecast


# ============================================================
# 일괄 실행 스크립트
# ============================================================

def _write_inputs(tmp_path, products_df, stocks_df, movements_df):
    args = []
    for name, frame in {"products": products_df, "stocks": stocks_df, "movements": movements_df}.items():
        path = tmp_path / f"{name}.csv"
        frame.to_csv(path, index=False)
        args += [f"--{name}", str(path)]
    return args


def test_batch_main_writes_summary(tmp_path, capsys, products_df, stocks_df, movements_df):
    """요약 CSV 저장 및 품절 임박 출력"""
    output = tmp_path / "summary.csv"
    args = _write_inputs(tmp_path, products_df, stocks_df, movements_df)

    code = forecast_batch.main(
        args + ["--horizon", "15", "--today", "2024-03-01", "--output", str(output)]
    )

    assert code == 0
    summary = pd.read_csv(output)
    assert summary["product_id"].tolist() == ["P1", "P2", "P3"]
    assert "Stockout risks:" in capsys.readouterr().out


def test_batch_main_reports_domain_errors(tmp_path, products_df, stocks_df, movements_df):
    """입력 파일 누락 - 종료 코드 1"""
    args = _write_inputs(tmp_path, products_df, stocks_df, movements_df)
    args[args.index("--stocks") + 1] = str(tmp_path / "nope.csv")

    assert forecast_batch.main(args) == 1


def test_batch_rejects_unknown_horizon(tmp_path, products_df, stocks_df, movements_df):
    """허용되지 않은 예측 기간 - argparse 오류"""
    args = _write_inputs(tmp_path, products_df, stocks_df, movements_df)

    with pytest.raises(SystemExit):
        forecast_batch.main(args + ["--horizon", "45"])

"""
재고 예측 일괄 실행 스크립트

상품/재고/이동 테이블(CSV 또는 Excel)을 읽어 모든 상품의 재고 예측을
실행하고, 요약 표와 품절 임박 상품을 출력합니다.

사용 예:
    python forecast_batch.py --products products.csv --stocks stocks.csv \\
        --movements movements.csv --horizon 30 --output summary.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from stock_forecast.analytics import build_forecast_summary, detect_stockout_risks
from stock_forecast.common.performance import measure_time_context
from stock_forecast.core.config import CONFIG
from stock_forecast.data_sources import FileLoader
from stock_forecast.domain import DomainError
from stock_forecast.pipeline import load_inputs, run_forecasts


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Project stock levels per product.")
    parser.add_argument("--products", required=True, help="product catalog (csv/xlsx)")
    parser.add_argument("--stocks", required=True, help="stock per area (csv/xlsx)")
    parser.add_argument("--movements", required=True, help="movement log (csv/xlsx)")
    parser.add_argument(
        "--horizon",
        type=int,
        choices=CONFIG.forecast.allowed_horizons,
        default=CONFIG.forecast.default_horizon_days,
        help="forecast horizon in days",
    )
    parser.add_argument("--today", default=None, help="reference date (YYYY-MM-DD)")
    parser.add_argument("--output", default=None, help="write the summary to this csv")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        with measure_time_context("table loading"):
            inputs = load_inputs(
                FileLoader(args.products),
                FileLoader(args.stocks),
                FileLoader(args.movements),
            )
        results = run_forecasts(inputs, horizon_days=args.horizon, today=args.today)
    except DomainError as exc:
        logger.error(f"Forecast aborted: {exc}")
        return 1

    summary = build_forecast_summary(results)
    risks = detect_stockout_risks(results)

    print(summary.to_string(index=False))
    if not risks.empty:
        print()
        print("Stockout risks:")
        print(risks.to_string(index=False))

    if args.output:
        summary.to_csv(args.output, index=False)
        logger.info(f"Summary written to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

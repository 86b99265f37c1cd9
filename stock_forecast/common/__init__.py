"""공통 유틸리티 모듈.

여러 모듈에서 공통으로 사용하는 유틸리티 함수들을 제공합니다.
"""

from .data_utils import (
    EMPTY_SUMMARY_COLUMNS,
    add_days,
    empty_summary_frame,
    resolve_today,
)
from .performance import PerformanceContext, measure_time, measure_time_context

__all__ = [
    "resolve_today",
    "add_days",
    "empty_summary_frame",
    "EMPTY_SUMMARY_COLUMNS",
    "measure_time",
    "measure_time_context",
    "PerformanceContext",
]

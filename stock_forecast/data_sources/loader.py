"""Unified data loading interfaces for in-memory frames and CSV/Excel files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

import pandas as pd

from ..domain.exceptions import DataLoadError

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")


class Loader(Protocol):
    """Simple protocol describing a load operation that returns a DataFrame."""

    def load(self) -> pd.DataFrame:  # pragma: no cover - interface definition
        ...


@dataclass(frozen=True)
class StaticFrameLoader:
    """Loader implementation that simply returns an in-memory DataFrame."""

    frame: pd.DataFrame

    def load(self) -> pd.DataFrame:
        return self.frame.copy()


@dataclass(frozen=True)
class FileLoader:
    """
    CSV 또는 Excel 파일에서 테이블을 읽는 로더.

    확장자로 형식을 판단합니다 (.xlsx/.xlsm/.xls는 Excel, 그 외는 CSV).

    Attributes:
        path: 파일 경로
        sheet_name: Excel 시트 이름 또는 인덱스 (기본값: 첫 시트)
    """

    path: Union[str, Path]
    sheet_name: Union[str, int] = 0

    def load(self) -> pd.DataFrame:
        path = Path(self.path)
        if not path.exists():
            raise DataLoadError(f"File not found: {path}")

        try:
            if path.suffix.lower() in EXCEL_SUFFIXES:
                frame = pd.read_excel(path, sheet_name=self.sheet_name)
            else:
                frame = pd.read_csv(path)
        except (OSError, ValueError, ImportError) as exc:
            logger.error(f"Failed to read {path}: {exc}")
            raise DataLoadError(f"Could not read {path.name}: {exc}") from exc

        logger.debug(f"Loaded {len(frame)} rows from {path}")
        return frame

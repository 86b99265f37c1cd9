"""
데이터 소스 계층

CSV/Excel 파일과 메모리 상의 DataFrame을 같은 인터페이스로 불러옵니다.
"""

from .loader import FileLoader, Loader, StaticFrameLoader

__all__ = [
    "Loader",
    "StaticFrameLoader",
    "FileLoader",
]

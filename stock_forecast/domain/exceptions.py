"""
도메인 계층 예외 정의

입력 테이블을 불러오고 검증하는 경계 계층에서 발생하는 예외입니다.
예측 엔진 자체는 예외를 던지지 않고, 판단할 수 없는 값은 None으로 돌려줍니다.
"""

from __future__ import annotations


class DomainError(Exception):
    """
    도메인 계층의 기본 예외 클래스.

    모든 도메인 예외는 이 클래스를 상속합니다.
    """

    pass


class ValidationError(DomainError):
    """
    입력 테이블 검증 실패 시 발생하는 예외.

    예: DataFrame이 아닌 입력, 필수 컬럼 누락 등
    """

    pass


class DataLoadError(DomainError):
    """
    데이터 로드 실패 시 발생하는 예외.

    CSV/Excel 파일이 없거나 읽을 수 없는 경우 사용합니다.
    """

    pass

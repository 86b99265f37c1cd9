"""
Stock Forecast 패키지

재고 예측 엔진을 UI와 분리된 순수 함수 모듈로 제공합니다.
주요 구성:
- 도메인 모델과 입력 테이블 정규화 (domain)
- 소비율 추정, 재고 투영, 품절/재주문 일자 계산 (forecast)
- 권장 사항, 위험 SKU 요약 테이블 (analytics)
- 여러 상품에 대한 일괄 실행 (pipeline)
"""

from __future__ import annotations

__version__ = "1.0.0"

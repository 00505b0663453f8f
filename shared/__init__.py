"""공통 유틸리티 (로깅, 오류 처리)"""

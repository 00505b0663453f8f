"""설정, 데이터 로딩, 입력 검증 유틸리티"""

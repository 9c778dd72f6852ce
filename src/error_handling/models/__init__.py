"""
예제에서 사용하는 Pydantic 기반 도메인 모델 패키지.
Pydantic-based domain models used by the examples.
"""

"""
예제 서비스 패키지.
Example services.

순수 함수(안전한 접근)와 외부 조회 함수를 주입받는 비동기 워크플로를 제공한다.
It provides pure functions (safe access) and async workflows that take an
injected lookup function.
"""

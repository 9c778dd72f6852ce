"""
안전한 인덱스 접근과 안전한 속성 접근 예제.

Safe indexed access and safe attribute access, each written in
LBYL ("look before you leap") and EAFP ("easier to ask forgiveness
than permission") style.
"""

from collections.abc import Sequence
from typing import Any, Final


GREETING_PREFIX: Final[str] = "Hi "


def safe_square_of_second_element(values: Sequence[float | None]) -> float:
    """
    두 번째 원소의 제곱을 반환한다. 원소가 없으면 0을 반환한다 (LBYL).
    Return the square of the second element, or 0 when it is missing (LBYL).
    """
    if len(values) < 2 or values[1] is None:
        return 0

    second = values[1]
    return second * second


def square_of_second_element_eafp(values: Sequence[float | None]) -> float:
    """Same contract as safe_square_of_second_element, written EAFP style."""
    try:
        second = values[1]
        return second * second
    except (IndexError, TypeError):
        # 범위를 벗어났거나 None 인 경우 / Out of range, or None
        return 0


def greet(user: Any) -> str:
    """
    EAFP 방식 인사말. 일단 접근해 보고 실패하면 기본 인사말로 복구한다.
    EAFP greeting: try the access, recover to the bare greeting on failure.
    """
    try:
        return GREETING_PREFIX + str.split(user.name, " ")[0]
    except (AttributeError, TypeError):
        return GREETING_PREFIX


def greet_safe(user: Any) -> str:
    """
    LBYL 방식 인사말. 이름이 있는지 먼저 확인한 뒤 분리한다.
    LBYL greeting: check the name is present before splitting it.
    """
    name = getattr(user, "name", None)

    if not isinstance(name, str):
        return GREETING_PREFIX

    return GREETING_PREFIX + str.split(name, " ")[0]

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """
    성공 결과 값을 담는 래퍼입니다.

    Wrapper type that represents the successful branch of a Result.
    """

    # match Ok(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Ok(value)`
    __match_args__ = ("value",)

    value: T


@dataclass(slots=True, frozen=True)
class Err[E]:
    """
    실패 사유를 값으로 담는 래퍼입니다. 예외를 던지는 대신 반환합니다.

    Wrapper type that carries a failure reason as a value.
    It is returned instead of being raised.
    """

    # match Err(error) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Err(error)`
    __match_args__ = ("error",)

    error: E


type Result[T, E] = Ok[T] | Err[E]
"""
성공 값 또는 실패 사유 중 정확히 하나를 담는 공용 Result 타입입니다.

Shared Result type holding exactly one of a success value or a failure reason.

- T: 성공 시 반환되는 값의 타입 (success type)
- E: 실패 사유의 타입 (failure reason type)
"""


def is_ok[T, E](result: Result[T, E]) -> bool:
    """Return True if the given Result is an Ok value."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> bool:
    """Return True if the given Result is an Err value."""
    return isinstance(result, Err)


def unwrap_or[T, E](result: Result[T, E], default: T) -> T:
    """
    Ok 이면 값을, Err 이면 default 를 반환합니다.

    Return the Ok value, or `default` when the result is an Err.
    """
    match result:
        case Ok(value):
            return value
        case Err():
            return default
        case _:
            raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def map_ok[T, U, E](result: Result[T, E], func: Callable[[T], U]) -> Result[U, E]:
    """
    Ok 값에만 func 를 적용하고, Err 는 그대로 통과시킵니다.

    Apply `func` to an Ok value and pass an Err through untouched.
    """
    match result:
        case Ok(value):
            return Ok(func(value))
        case Err():
            return result
        case _:
            raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or",
    "map_ok",
]

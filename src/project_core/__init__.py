"""
project_core 패키지.

예제 전반에서 공유되는 에러 표현(Result 타입)을 제공합니다.

The `project_core` package.

Provides the shared error-as-value representation (the Result type)
used by the error handling examples.
"""

from .result import Err, Ok, Result, is_err, is_ok, map_ok, unwrap_or

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or",
    "map_ok",
]

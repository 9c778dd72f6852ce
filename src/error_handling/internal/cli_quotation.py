"""
이 모듈은 JSON 사용자 파일을 메모리 디렉터리로 읽어와
두 가지 방식(예외 처리 / Result 타입)으로 보험료 견적을 계산하는 CLI 유틸입니다.

This module provides a small CLI that loads users from a JSON file into an
in-memory directory and computes a quotation with either the exception-based
or the Result-based workflow.
"""

import argparse
import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from project_core import Err, Ok

from error_handling.logging_config import setup_logging
from error_handling.services.service_quotation import (
    get_quotation_result,
    get_quotation_with_exception_handling,
)
from error_handling.services.service_user_directory import InMemoryUserDirectory


logger = logging.getLogger(__name__)

_USERS_JSON_DEFAULT: Final[str] = "users.json"

EXIT_OK: Final[int] = 0
EXIT_LOOKUP_FAILED: Final[int] = 1
EXIT_BAD_INPUT: Final[int] = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """명령행 인자를 파싱한다.
    Parse command-line arguments.
    """
    parser = argparse.ArgumentParser(
        description=(
            "사용자 나이에 따른 보험료 견적을 계산합니다.\n"
            "Compute an age-based quotation for a user."
        ),
    )

    parser.add_argument(
        "--users",
        type=str,
        default=os.getenv("QUOTATION_USERS_JSON", _USERS_JSON_DEFAULT),
        help=(
            "사용자 JSON 파일 경로. "
            "기본값은 QUOTATION_USERS_JSON 또는 'users.json' 입니다.\n"
            "Path to the users JSON file "
            "(default: QUOTATION_USERS_JSON or 'users.json')."
        ),
    )
    parser.add_argument(
        "--email",
        type=str,
        required=True,
        help="견적을 낼 사용자 이메일 / Email of the user to quote.",
    )
    parser.add_argument(
        "--mode",
        choices=("exception", "result"),
        default="result",
        help=(
            "사용할 워크플로 (기본: result).\n"
            "Workflow to use (default: result)."
        ),
    )
    parser.add_argument(
        "--unavailable",
        action="store_true",
        help=(
            "사용자 서비스 장애를 흉내 낸다.\n"
            "Simulate the user service being down."
        ),
    )

    return parser.parse_args(argv)


async def run_quotation(directory: InMemoryUserDirectory, email: str, mode: str) -> int:
    """선택한 방식으로 견적을 계산하고 출력한 뒤 종료 코드를 반환한다.
    Compute and print the quotation, returning the process exit code.
    """
    if mode == "exception":
        premium = await get_quotation_with_exception_handling(
            email,
            directory.get_user_details,
        )
        print(f"premium: {premium}")
        return EXIT_OK

    result = await get_quotation_result(email, directory.get_user_details_result)

    match result:
        case Ok(value=premium):
            print(f"premium: {premium}")
            return EXIT_OK
        case Err(error=user_error):
            print(f"lookup failed: {user_error.code.value} ({user_error.message})")
            return EXIT_LOOKUP_FAILED
        case _:
            raise TypeError("Unexpected result type from get_quotation_result.")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.
    CLI entry point.
    """
    args = parse_args(argv)
    setup_logging()

    users_path = Path(args.users)
    try:
        directory = InMemoryUserDirectory.from_json_file(
            users_path,
            available=not args.unavailable,
        )
    except (OSError, ValueError) as exc:
        # pydantic ValidationError 도 ValueError 이다 / ValidationError is a ValueError
        logger.error("Failed to load users from %s: %s", users_path, exc)
        return EXIT_BAD_INPUT

    return asyncio.run(run_quotation(directory, args.email, args.mode))


if __name__ == "__main__":
    raise SystemExit(main())

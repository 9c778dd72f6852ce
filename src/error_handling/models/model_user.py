"""
사용자 관련 도메인 모델을 정의합니다.

Defines the user-related domain models.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    이름이 없을 수도 있는 사용자 레코드입니다.

    A user record whose name may be missing.
    """

    name: Annotated[str | None, Field(
        default=None,
        description=(
            "전체 이름(선택). 첫 번째 토큰이 인사말에 사용됩니다.\n"
            "Optional full name; its first token is used in greetings."
        ),
    )]

    email: Annotated[str, Field(
        description="사용자 이메일 / User email.",
    )]


class UserDetails(BaseModel):
    """
    사용자 조회 서비스가 돌려주는 상세 정보입니다.

    Details returned by the user lookup service.
    """

    name: str
    email: str

    age: Annotated[int, Field(
        ge=0,
        description="사용자 나이 (0 이상) / User age (non-negative).",
    )]

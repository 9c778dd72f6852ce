"""
메모리 기반 사용자 조회 서비스.

In-memory stand-in for the external user service. It offers both lookup
contracts used by the quotation workflows: one that raises and one that
returns a Result.
"""

from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter

from project_core import Err, Ok

from error_handling.errors import (
    ServiceUnavailableException,
    UserNotFoundException,
    UserServiceError,
    UserServiceErrorCode,
    UserServiceResult,
)
from error_handling.models.model_user import UserDetails


_USERS_ADAPTER = TypeAdapter(list[UserDetails])


class InMemoryUserDirectory:
    """이메일로 UserDetails 를 찾는 메모리 디렉터리.
    Directory of UserDetails keyed by email.
    """

    def __init__(self, users: Iterable[UserDetails], available: bool = True) -> None:
        self._users: dict[str, UserDetails] = {}
        for user in users:
            if user.email in self._users:
                raise ValueError(f"Duplicate user email {user.email!r}.")
            self._users[user.email] = user
        self.available = available

    @classmethod
    def from_json_file(cls, path: Path, available: bool = True) -> "InMemoryUserDirectory":
        """JSON 배열 파일에서 사용자 목록을 읽어온다.
        Load users from a JSON file holding an array of user objects.

        깨진 JSON 이나 UTF-8 이 아닌 바이트도 ValidationError 로 보고된다.
        Malformed JSON and non-UTF-8 bytes are reported as ValidationError.
        """
        users = _USERS_ADAPTER.validate_json(path.read_bytes())
        return cls(users, available=available)

    async def get_user_details(self, user_email: str) -> UserDetails:
        if not self.available:
            raise ServiceUnavailableException("User service is not available.")

        user = self._users.get(user_email)
        if user is None:
            raise UserNotFoundException(f"No user with email {user_email!r}.")
        return user

    async def get_user_details_result(
        self,
        user_email: str,
    ) -> UserServiceResult[UserDetails]:
        if not self.available:
            return Err(
                UserServiceError(
                    code=UserServiceErrorCode.SERVICE_NOT_AVAILABLE,
                    message="User service is not available.",
                )
            )

        user = self._users.get(user_email)
        if user is None:
            return Err(
                UserServiceError(
                    code=UserServiceErrorCode.USER_NOT_FOUND,
                    message=f"No user with email {user_email!r}.",
                )
            )
        return Ok(user)

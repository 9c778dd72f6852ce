from dataclasses import dataclass
from enum import Enum

from project_core import Result


class UserServiceErrorCode(str, Enum):
    """
    사용자 조회 서비스에서 발생하는 실패 사유.
    Failure reasons reported by the user lookup service.
    """

    USER_NOT_FOUND = "USER-NOT-FOUND"
    SERVICE_NOT_AVAILABLE = "SERVICE-NOT-AVAILABLE"


@dataclass(slots=True, frozen=True)
class UserServiceError:
    """
    사용자 조회 실패를 값으로 표현한 도메인 에러.
    Domain error describing a failed user lookup as a value.
    """

    code: UserServiceErrorCode
    message: str


type UserServiceResult[T] = Result[T, UserServiceError]


class UserServiceException(Exception):
    """
    예외를 던지는 조회 함수(EAFP 방식)가 사용하는 기본 예외.
    Base exception raised by lookups that signal failure by raising.
    """

    code: UserServiceErrorCode = UserServiceErrorCode.SERVICE_NOT_AVAILABLE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundException(UserServiceException):
    code = UserServiceErrorCode.USER_NOT_FOUND


class ServiceUnavailableException(UserServiceException):
    code = UserServiceErrorCode.SERVICE_NOT_AVAILABLE


def error_from_exception(exc: Exception) -> UserServiceError:
    """
    조회 중 발생한 예외를 UserServiceError 로 변환한다.
    Map an exception raised during a lookup into a UserServiceError.
    """
    match exc:
        case UserServiceException(code=code, message=message):
            return UserServiceError(code=code, message=message)
        case _:
            # 타임아웃 등 알 수 없는 실패는 서비스 장애로 취급한다.
            # Unknown failures (timeouts, etc.) count as the service being down.
            return UserServiceError(
                code=UserServiceErrorCode.SERVICE_NOT_AVAILABLE,
                message=str(exc) or type(exc).__name__,
            )

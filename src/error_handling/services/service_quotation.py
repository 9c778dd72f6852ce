"""
사용자 나이에 따른 보험료 견적 워크플로.

Age-based quotation workflow, written twice:

- `get_quotation_with_exception_handling`: the lookup may raise; failures are
  caught, logged and collapsed to the fallback premium.
- `get_quotation_with_result_type`: the lookup returns a Result; the caller
  has to handle both the Ok and the Err branch.

Both suspend exactly once, on the injected lookup. Neither adds a timeout.
"""

import logging
from collections.abc import Awaitable, Callable

from project_core import Err, Ok, map_ok

from error_handling.config import get_settings
from error_handling.errors import UserServiceResult, error_from_exception
from error_handling.models.model_user import UserDetails


logger = logging.getLogger(__name__)


type RaisingLookup = Callable[[str], Awaitable[UserDetails]]
type ResultLookup = Callable[[str], Awaitable[UserServiceResult[UserDetails]]]


def premium_for_age(age: int) -> int:
    """
    나이 기준 미만이면 젊은 운전자 보험료, 아니면 기본 보험료를 반환한다.
    Return the young premium below the age threshold, else the standard one.
    """
    settings = get_settings()

    if age < settings.age_threshold:
        return settings.young_premium
    return settings.standard_premium


async def get_quotation_with_exception_handling(
    user_email: str,
    get_user_details: RaisingLookup,
) -> int:
    """
    예외 처리 방식 견적. 조회 실패 원인은 호출자에게 전달되지 않는다.
    Quotation using exception handling. The failure cause is not passed on.
    """
    try:
        user_details = await get_user_details(user_email)
        return premium_for_age(user_details.age)
    except Exception:  # noqa: BLE001
        logger.error("Error in getting user details")

    return get_settings().fallback_premium


async def get_quotation_result(
    user_email: str,
    get_user_details: ResultLookup,
) -> UserServiceResult[int]:
    """
    Result 타입 방식 견적. 실패 사유를 그대로 값으로 돌려준다.
    Quotation using a Result type, passing the failure reason on as data.
    """
    user_details_or_error = await get_user_details(user_email)

    return map_ok(
        user_details_or_error,
        lambda user_details: premium_for_age(user_details.age),
    )


async def get_quotation_with_result_type(
    user_email: str,
    get_user_details: ResultLookup,
) -> int:
    """
    Result 타입 방식 견적. 실패하면 사유와 무관하게 기본 보험료를 반환한다.
    Quotation using a Result type; any failure reason yields the fallback premium.
    """
    result = await get_quotation_result(user_email, get_user_details)

    match result:
        case Ok(value=premium):
            return premium
        case Err(error=user_error):
            logger.warning(
                "User lookup failed for quotation: %s",
                user_error.code.value,
            )
            return get_settings().fallback_premium
        case _:
            raise TypeError("Unexpected result type from get_quotation_result.")


def as_result_lookup(get_user_details: RaisingLookup) -> ResultLookup:
    """
    예외를 던지는 조회 함수를 Result 를 반환하는 조회 함수로 감싼다.
    Wrap a raising lookup so it returns a Result instead.
    """

    async def lookup(user_email: str) -> UserServiceResult[UserDetails]:
        try:
            user_details = await get_user_details(user_email)
        except Exception as exc:  # noqa: BLE001
            return Err(error_from_exception(exc))
        return Ok(user_details)

    return lookup

"""
EAFP / LBYL / errors-as-values 예제 패키지.
Error handling example package: EAFP, LBYL and errors as values.

안전한 인덱스 접근, 안전한 속성 접근(인사말), 그리고 사용자 나이에 따른
보험료 견적 워크플로(예외 처리 방식 / Result 타입 방식)를 포함한다.
It contains safe indexed access, safe attribute access (greetings), and an
age-based quotation workflow written with exception handling and with a
Result type.
"""

from error_handling.services.service_access import (
    greet,
    greet_safe,
    safe_square_of_second_element,
    square_of_second_element_eafp,
)
from error_handling.services.service_quotation import (
    as_result_lookup,
    get_quotation_result,
    get_quotation_with_exception_handling,
    get_quotation_with_result_type,
    premium_for_age,
)

__all__ = [
    "safe_square_of_second_element",
    "square_of_second_element_eafp",
    "greet",
    "greet_safe",
    "premium_for_age",
    "get_quotation_with_exception_handling",
    "get_quotation_with_result_type",
    "get_quotation_result",
    "as_result_lookup",
]

from functools import lru_cache
from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


AGE_THRESHOLD_DEFAULT: Final[int] = 30
YOUNG_PREMIUM_DEFAULT: Final[int] = 500
STANDARD_PREMIUM_DEFAULT: Final[int] = 300
FALLBACK_PREMIUM_DEFAULT: Final[int] = 0


class Settings(BaseSettings):
    """
    견적 예제 전역 설정.
    Global settings for the quotation examples.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="QUOTATION_",
        extra="ignore",
    )

    age_threshold: int = Field(
        default=AGE_THRESHOLD_DEFAULT,
        ge=0,
        description=(
            "이 나이 미만이면 젊은 운전자 보험료를 적용한다 (엄격한 '<' 비교).\n"
            "Ages strictly below this value get the young premium."
        ),
    )
    young_premium: int = Field(
        default=YOUNG_PREMIUM_DEFAULT,
        ge=0,
        description="age_threshold 미만 보험료 / Premium below age_threshold.",
    )
    standard_premium: int = Field(
        default=STANDARD_PREMIUM_DEFAULT,
        ge=0,
        description="age_threshold 이상 보험료 / Premium at or above age_threshold.",
    )
    fallback_premium: int = Field(
        default=FALLBACK_PREMIUM_DEFAULT,
        ge=0,
        description=(
            "사용자 조회에 실패했을 때 반환하는 보험료.\n"
            "Premium returned when the user lookup fails."
        ),
    )

    log_level: str = Field(
        default="INFO",
        description="로그 레벨 / Logging level name (DEBUG, INFO, ...).",
    )
    environment: str = Field(
        default="local",
        description=(
            "실행 환경(local/dev/prod 등) / "
            "Runtime environment (local/dev/prod, etc.)."
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return Settings()

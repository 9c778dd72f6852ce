import logging

from error_handling.config import get_settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    패키지 로거에 콘솔 핸들러를 설정한다. 여러 번 호출해도 핸들러가 중복되지 않는다.
    Configure a console handler on the package logger.
    Calling it again replaces the handler instead of adding a duplicate.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    package_logger = logging.getLogger("error_handling")
    package_logger.setLevel((level or get_settings().log_level).upper())

    package_logger.handlers = []
    package_logger.addHandler(console_handler)

    return package_logger

"""
Loguru sinks and shared state for Logger.io.

Console output always; an hourly rotated file next to it while DEBUG is on.
Standard-library loggers (uvicorn, fastapi) are routed through loguru so a
request's access line and the use case lines around it share one format.
"""

from contextvars import ContextVar
from enum import StrEnum
import logging
import os
import sys

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR as DEFAULT_LOG_DIR
from src.platform.logging.service_context import get_service_context


# tests point this at test/test_log before anything imports the module
LOG_DIR = os.environ.get('TEST_LOG_DIR', str(DEFAULT_LOG_DIR))

# Keys whose values never reach the log output
SENSITIVE_KEYWORDS = frozenset({'purchase_token'})

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


def access_log_level(message: str) -> str | None:
    """
    Level for a uvicorn access line, picked from its status code.

    '127.0.0.1:51234 - "POST /api/tickets/<id>/purchase HTTP/1.1" 409' -> 'ERROR'
    Returns None for anything that is not an access line.
    """
    head, sep, tail = message.rpartition('" ')
    if not sep or ' HTTP/' not in head:
        return None
    try:
        status_code = int(tail.split()[0])
    except (ValueError, IndexError):
        return None

    for floor, level in ((500, 'CRITICAL'), (400, 'ERROR'), (300, 'WARNING'), (200, 'SUCCESS')):
        if status_code >= floor:
            return level
    return 'INFO'


class InterceptHandler(logging.Handler):
    """Forward standard-library records to loguru, keeping the original caller frame."""

    _bound = loguru_logger.bind(**_default_extra())

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.levelno <= logging.DEBUG and 'Using selector:' in message:
            return

        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._bound.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

loguru_logger.remove()
custom_logger = loguru_logger.bind(**_default_extra())
custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

if settings.DEBUG:
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    custom_logger.add(
        f'{LOG_DIR}/{prefix}{{time:YYYY-MM-DD_HH}}.log',
        format=io_log_format,
        level=min_log_level,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
for logger_name in ('uvicorn', 'uvicorn.error', 'uvicorn.access', 'fastapi'):
    std_logger = logging.getLogger(logger_name)
    std_logger.handlers = [InterceptHandler()]
    std_logger.propagate = False

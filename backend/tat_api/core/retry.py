# 재시도 로직 유틸리티
# 주니어 개발자님께: MongoDB 서버가 아직 뜨지 않았거나 네트워크가 일시적으로
# 불안정하면 첫 연결이 실패할 수 있습니다. 몇 번 재시도하면 성공하는 경우가 많습니다.
# tenacity 라이브러리를 사용하여 재시도 로직을 구현합니다.

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)
import logging
from typing import Type, Tuple

from pymongo.errors import ConnectionFailure

# 로거 설정
logger = logging.getLogger(__name__)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 0.5,
    max_wait: float = 5.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure,)
):
    """
    DB 연결 확인(ping)용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    Args:
        max_attempts: 최대 시도 횟수 (처음 1번 포함)
        initial_wait: 첫 재시도 전 대기 시간 (초)
        max_wait: 최대 대기 시간 (초)
        exceptions: 재시도할 예외 타입. ServerSelectionTimeoutError도
            ConnectionFailure의 하위 클래스라 함께 잡힙니다.

    마지막 시도까지 실패하면 원래 예외를 그대로 다시 던집니다 (reraise=True).
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=initial_wait, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )

# 재시도 로직 유틸리티
# MongoDB 조회/삭제는 일시적인 네트워크 오류나 primary 전환 중에 실패할 수 있습니다.
# 멱등한 호출에 한해 tenacity로 몇 번 재시도합니다.
# insert/update는 중복 쓰기 위험이 있으므로 재시도하지 않습니다.

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
    after_log,
)
import logging
from typing import Type, Tuple

from pymongo.errors import AutoReconnect, NetworkTimeout

logger = logging.getLogger(__name__)

TRANSIENT_DB_ERRORS: Tuple[Type[Exception], ...] = (AutoReconnect, NetworkTimeout)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 0.2,
    max_wait: float = 2.0,
    exceptions: Tuple[Type[Exception], ...] = TRANSIENT_DB_ERRORS
):
    """
    저장소 호출용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    1. max_attempts: 최대 시도 횟수 (처음 1번 + 재시도 포함)
    2. initial_wait: 첫 재시도 전 대기 시간 (초). 지수 백오프의 시작 값입니다.
    3. max_wait: 최대 대기 시간 (초)
    4. exceptions: 재시도할 예외 타입. 그 외 예외는 즉시 전파됩니다.

    마지막 시도까지 실패하면 원래 예외가 그대로 다시 발생합니다 (reraise=True).
    async 함수에도 그대로 붙일 수 있습니다.
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=2,
            min=initial_wait,
            max=max_wait
        ),
        retry=retry_if_exception_type(exceptions),
        reraise=True,
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.ERROR)
    )


# 기본 재시도 데코레이터 (repositories 에서 사용)
db_retry = create_db_retry_decorator()

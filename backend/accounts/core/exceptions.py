# 커스텀 예외 클래스 정의
# - 검증 실패(필드 단위 사유)와 저장소 제약 위반을 서로 다른 예외로 구분
# - 비밀번호 해시 라이브러리 예외는 감싸지 않고 그대로 전파

from typing import FrozenSet, Iterable, Optional


class AccountsError(Exception):
    """사용자 계정 관련 기본 예외 클래스

    try-except 블록에서 계정 관련 예외만 한 번에 잡을 수 있도록 합니다.
    """
    pass


class UserValidationError(AccountsError):
    """저장 전 검증에서 하나 이상의 필드 위반이 발견된 경우

    사용자가 입력을 고쳐서 다시 시도하면 되는, 항상 복구 가능한 오류입니다.

    Attributes:
        errors: (field, reason) 쌍의 집합 (FieldError)
    """
    def __init__(self, errors: Iterable):
        self.errors: FrozenSet = frozenset(errors)
        fields = ", ".join(sorted({e.field for e in self.errors}))
        super().__init__(f"사용자 검증 실패 [{fields}]")


class StorageConstraintViolation(AccountsError):
    """애플리케이션 검증은 통과했지만 저장소가 쓰기를 거부한 경우

    동시 가입으로 인한 이메일 unique 인덱스 충돌이 대표적입니다.
    특정 필드에 귀속되지 않으며 호출자에게는 "다시 시도" 로 안내합니다.

    Attributes:
        constraint: 위반된 제약 이름 (알 수 있는 경우)
        message: 에러 메시지
    """
    def __init__(self, message: str, constraint: Optional[str] = None):
        self.constraint = constraint
        self.message = message
        label = f" [{constraint}]" if constraint else ""
        super().__init__(f"저장소 제약 위반{label}: {message}")

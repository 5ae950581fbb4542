# 사용자 레코드 정규화/검증
# - normalize: 이메일 소문자 변환 (저장 직전 항상 적용)
# - validate: 필드별 위반 사유를 (field, reason) 집합으로 반환
# - 예외를 던지지 않는 순수 함수. 저장 거부 여부는 호출자가 결정

from collections import defaultdict
from typing import Dict, Iterable, List, NamedTuple, Optional, Set

from ..core.config import settings
from ..models.user import UserRecord

BLANK = "can't be blank"
TAKEN = "has already been taken"
CONFIRMATION_MISMATCH = "doesn't match Password"

# bcrypt 는 72 바이트 이후를 잘라내므로 그보다 긴 비밀번호는 거부
PASSWORD_MAX_BYTES = 72


class FieldError(NamedTuple):
    field: str
    reason: str


def too_short(minimum: int) -> str:
    return f"is too short (minimum is {minimum} characters)"


def too_long(maximum: int) -> str:
    return f"is too long (maximum is {maximum} characters)"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def normalize(record: UserRecord) -> UserRecord:
    if record.email is None:
        return record.model_copy()
    return record.model_copy(update={"email": record.email.lower()})


def validate(
    record: UserRecord,
    existing_records: Iterable[UserRecord],
    *,
    password_required: bool,
    min_password_length: Optional[int] = None,
) -> Set[FieldError]:
    """
    저장 후보 레코드를 검증합니다.

    Args:
        record: normalize 를 거친 후보 레코드
        existing_records: 이미 저장된 레코드들. 같은 id 를 가진 레코드(수정 전 자기 자신)는 무시합니다.
        password_required: 생성 시, 또는 비밀번호를 명시적으로 바꾸는 경우 True.
            길이는 최소 min_password_length 글자, 최대 72 바이트(UTF-8)
        min_password_length: 생략하면 settings.PASSWORD_MIN_LENGTH

    password_confirmation 은 값이 있을 때만 password 와 비교합니다.

    Returns:
        위반이 없으면 빈 집합
    """
    errors: Set[FieldError] = set()

    if _is_blank(record.name):
        errors.add(FieldError("name", BLANK))

    if _is_blank(record.email):
        errors.add(FieldError("email", BLANK))
    else:
        folded = record.email.lower()
        for other in existing_records:
            if record.id is not None and other.id == record.id:
                continue
            if other.email is not None and other.email.lower() == folded:
                errors.add(FieldError("email", TAKEN))
                break

    if password_required:
        minimum = settings.PASSWORD_MIN_LENGTH if min_password_length is None else min_password_length
        if _is_blank(record.password):
            errors.add(FieldError("password", BLANK))
        elif len(record.password) < minimum:
            errors.add(FieldError("password", too_short(minimum)))
        elif len(record.password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            errors.add(FieldError("password", too_long(PASSWORD_MAX_BYTES)))

    # 확인값은 보낸 경우에만 비교
    if record.password_confirmation is not None and record.password_confirmation != record.password:
        errors.add(FieldError("password_confirmation", CONFIRMATION_MISMATCH))

    return errors


def errors_by_field(errors: Iterable[FieldError]) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = defaultdict(list)
    for error in errors:
        grouped[error.field].append(error.reason)
    return {field: sorted(reasons) for field, reasons in sorted(grouped.items())}

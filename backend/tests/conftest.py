# 테스트 공용 픽스처 (DB 의존성 없음)
# - bcrypt 라운드를 낮춰 테스트 속도 확보 (settings 로드 전에 설정)
# - 메모리 저장소: 이메일 대소문자 무시 unique 제약을 저장소 레벨에서 흉내냄

import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import itertools
from datetime import datetime
from typing import Dict, Optional

import pytest

from accounts.core.exceptions import StorageConstraintViolation
from accounts.models.user import UserRecord
from accounts.services.user_service import UserService


class InMemoryUserRepository:
    def __init__(self):
        self.rows: Dict[str, UserRecord] = {}
        self._ids = itertools.count(1)
        # True 이면 조회는 항상 비어 있는 것처럼 동작 (동시 가입 경쟁 재현용)
        self.stale_reads = False

    def _taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            row.email.lower() == email.lower() and row.id != exclude_id
            for row in self.rows.values()
        )

    async def get(self, user_id: str) -> Optional[UserRecord]:
        return self.rows.get(user_id)

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        if self.stale_reads:
            return None
        for row in self.rows.values():
            if row.email.lower() == email.lower():
                return row
        return None

    async def create(self, record: UserRecord) -> UserRecord:
        if self._taken(record.email):
            raise StorageConstraintViolation("email already exists", constraint="email_ci_unique")
        now = datetime.utcnow()
        row = record.model_copy(update={"id": str(next(self._ids)), "created_at": now, "updated_at": now})
        self.rows[row.id] = row
        return row

    async def update(self, record: UserRecord) -> Optional[UserRecord]:
        if record.id not in self.rows:
            return None
        if self._taken(record.email, exclude_id=record.id):
            raise StorageConstraintViolation("email already exists", constraint="email_ci_unique")
        row = record.model_copy(update={"updated_at": datetime.utcnow()})
        self.rows[row.id] = row
        return row

    async def delete(self, user_id: str) -> bool:
        return self.rows.pop(user_id, None) is not None


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo):
    return UserService(repo)

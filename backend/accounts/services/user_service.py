# 사용자 서비스 레이어
# - 저장 파이프라인: normalize -> validate -> (통과 시) 비밀번호 해시 -> 저장
# - 생성/수정/삭제/조회, 자격 증명 확인 (토큰/세션 발급 없음)
# - 애플리케이션 레벨 중복 체크는 빠른 안내용. 최종 보장은 DB unique 인덱스

import logging
from typing import List, Optional
from fastapi import Depends

from ..core.exceptions import StorageConstraintViolation, UserValidationError
from ..core.security import get_password_hash, verify_password
from ..models.user import UserRecord
from ..repositories.user_repository import UserRepository
from .user_validation import normalize, validate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def _existing_with_email(self, record: UserRecord) -> List[UserRecord]:
        if not record.email or not record.email.strip():
            return []
        found = await self.repo.get_by_email(record.email)
        return [found] if found else []

    async def _check(self, candidate: UserRecord, *, password_required: bool) -> UserRecord:
        candidate = normalize(candidate)
        existing = await self._existing_with_email(candidate)
        errors = validate(candidate, existing, password_required=password_required)
        if errors:
            logger.info("user save rejected fields=%s", sorted({e.field for e in errors}))
            raise UserValidationError(errors)
        if password_required:
            hashed = get_password_hash(candidate.password)
            candidate = candidate.model_copy(update={"hashed_password": hashed})
        return candidate.model_copy(update={"password": None, "password_confirmation": None})

    async def create_user(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        password_confirmation: Optional[str] = None,
    ) -> UserRecord:
        record = await self._check(
            UserRecord(name=name, email=email, password=password, password_confirmation=password_confirmation),
            password_required=True,
        )
        try:
            return await self.repo.create(record)
        except StorageConstraintViolation:
            logger.warning("user create hit storage constraint email=%s", record.email)
            raise

    async def update_user(
        self,
        user_id: str,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        password_confirmation: Optional[str] = None,
    ) -> Optional[UserRecord]:
        current = await self.repo.get(user_id)
        if current is None:
            return None
        changes = {"password": password, "password_confirmation": password_confirmation}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email
        record = await self._check(
            current.model_copy(update=changes),
            password_required=password is not None,
        )
        try:
            return await self.repo.update(record)
        except StorageConstraintViolation:
            logger.warning("user update hit storage constraint id=%s", user_id)
            raise

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        return await self.repo.get(user_id)

    async def delete_user(self, user_id: str) -> bool:
        return await self.repo.delete(user_id)

    async def authenticate(self, email: str, password: str) -> Optional[UserRecord]:
        if not email or not password:
            return None
        user = await self.repo.get_by_email(email.lower())
        if not user or not user.hashed_password:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user


def get_user_service(repo: UserRepository = Depends(UserRepository)) -> UserService:
    return UserService(repo)

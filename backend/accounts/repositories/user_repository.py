# 사용자 저장소 레이어
# - 데이터 접근(조회/생성/수정/삭제)만 담당 (서비스 로직 분리)
# - 이메일 조회는 unique 인덱스와 같은 collation 으로 대소문자 무시
# - 쓰기 실패(제약 위반 포함)는 StorageConstraintViolation 으로 변환
# - 재시도는 조회에만 적용. 쓰기/삭제는 한 번만 실행

import logging
from datetime import datetime
from typing import Optional
from beanie import PydanticObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..core.exceptions import StorageConstraintViolation
from ..core.retry import db_retry
from ..models.user import EMAIL_COLLATION, EMAIL_INDEX_NAME, User, UserRecord

logger = logging.getLogger(__name__)


def _object_id(user_id: str) -> Optional[PydanticObjectId]:
    # ObjectId(None) 은 새 id 를 만들어 버림
    if not user_id:
        return None
    try:
        return PydanticObjectId(user_id)
    except (InvalidId, TypeError, ValueError):
        return None


class UserRepository:
    @db_retry
    async def _find(self, user_id: str) -> Optional[User]:
        object_id = _object_id(user_id)
        if object_id is None:
            return None
        return await User.get(object_id)

    async def get(self, user_id: str) -> Optional[UserRecord]:
        user = await self._find(user_id)
        return user.to_record() if user else None

    @db_retry
    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        if not email:
            return None
        user = await User.find_one(User.email == email, collation=EMAIL_COLLATION)
        return user.to_record() if user else None

    async def create(self, record: UserRecord) -> UserRecord:
        user = User(name=record.name, email=record.email, hashed_password=record.hashed_password)
        try:
            await user.insert()
        except DuplicateKeyError as e:
            raise StorageConstraintViolation("email already exists", constraint=EMAIL_INDEX_NAME) from e
        except PyMongoError as e:
            raise StorageConstraintViolation(str(e)) from e
        logger.info("user created id=%s", user.id)
        return user.to_record()

    async def update(self, record: UserRecord) -> Optional[UserRecord]:
        user = await self._find(record.id)
        if user is None:
            return None
        user.name = record.name
        user.email = record.email
        user.hashed_password = record.hashed_password
        user.updated_at = datetime.utcnow()
        try:
            await user.save()
        except DuplicateKeyError as e:
            raise StorageConstraintViolation("email already exists", constraint=EMAIL_INDEX_NAME) from e
        except PyMongoError as e:
            raise StorageConstraintViolation(str(e)) from e
        return user.to_record()

    async def delete(self, user_id: str) -> bool:
        user = await self._find(user_id)
        if user is None:
            return False
        await user.delete()
        return True

# User 도메인 모델
# - UserRecord: 검증/정규화 파이프라인이 다루는 순수 모델 (DB 의존성 없음)
# - User: Beanie Document (MongoDB 저장 형태)
# - 이메일은 대소문자 무시 unique 인덱스 (collation strength 2)

from datetime import datetime
from typing import Optional
from beanie import Document
from pydantic import BaseModel, Field
from pymongo import ASCENDING, IndexModel
from pymongo.collation import Collation

EMAIL_INDEX_NAME = "email_ci_unique"
# strength=2 : 대소문자는 무시하고 악센트는 구분
EMAIL_COLLATION = Collation(locale="en", strength=2)


class UserRecord(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    hashed_password: Optional[str] = Field(default=None, repr=False)
    # 평문 비밀번호는 생성/변경 시점에만 존재하고 해시 후 폐기
    password: Optional[str] = Field(default=None, repr=False, exclude=True)
    password_confirmation: Optional[str] = Field(default=None, repr=False, exclude=True)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class User(Document):
    name: str
    email: str
    hashed_password: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "users"  # 컬렉션명
        indexes = [
            IndexModel(
                [("email", ASCENDING)],
                name=EMAIL_INDEX_NAME,
                unique=True,
                collation=EMAIL_COLLATION,
            ),
        ]

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=str(self.id) if self.id is not None else None,
            name=self.name,
            email=self.email,
            hashed_password=self.hashed_password,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

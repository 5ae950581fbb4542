# 보안 유틸리티
# - 비밀번호 해싱/검증 (passlib bcrypt)
# - 해시 라이브러리 오류는 그대로 전파 (해시 없이는 저장 불가)

from passlib.context import CryptContext

from .config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

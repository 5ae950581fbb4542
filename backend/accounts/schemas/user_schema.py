# 요청/응답 스키마 정의 (Pydantic 모델)
# - 요청 필드는 형식 검사 없이 문자열로 받음 (필드 검증은 user_validation 담당)

from typing import Dict, List, Optional
from pydantic import BaseModel

class UserCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    password_confirmation: Optional[str] = None

class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    password_confirmation: Optional[str] = None

class LoginRequest(BaseModel):
    email: str
    password: str

class UserPublic(BaseModel):
    id: str
    name: str
    email: str

class ValidationErrorResponse(BaseModel):
    detail: str = "Validation failed"
    errors: Dict[str, List[str]]

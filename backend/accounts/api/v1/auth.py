# 인증 라우터
# - 자격 증명 확인: POST /api/v1/auth/login (토큰/세션 발급 없음)

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.user_schema import LoginRequest, UserPublic
from ...services.user_service import UserService, get_user_service

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=UserPublic, summary="로그인 (이메일/비밀번호 확인)")
async def login(payload: LoginRequest, service: UserService = Depends(get_user_service)):
    user = await service.authenticate(payload.email, payload.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return {"id": user.id, "name": user.name, "email": user.email}

# 사용자 라우터
# - 생성: POST /api/v1/users
# - 조회: GET /api/v1/users/{user_id}
# - 수정: PATCH /api/v1/users/{user_id} (password 를 보낼 때만 비밀번호 변경)
# - 삭제: DELETE /api/v1/users/{user_id}
# 검증 실패(422), 저장소 제약 위반(409)은 main.py 의 예외 핸들러가 응답으로 변환

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ...models.user import UserRecord
from ...schemas.user_schema import UserCreate, UserPublic, UserUpdate, ValidationErrorResponse
from ...services.user_service import UserService, get_user_service

router = APIRouter(prefix="/users", tags=["users"])

_error_responses = {
    status.HTTP_409_CONFLICT: {"description": "저장소 제약 위반"},
    422: {"model": ValidationErrorResponse},
}

def _public(user: UserRecord) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email}

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED,
             responses=_error_responses, summary="사용자 생성 (이메일 중복 체크 포함)")
async def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    user = await service.create_user(
        payload.name, payload.email, payload.password, payload.password_confirmation
    )
    return _public(user)

@router.get("/{user_id}", response_model=UserPublic, summary="사용자 조회")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get_user(user_id)
    if user is None:
        raise _not_found()
    return _public(user)

@router.patch("/{user_id}", response_model=UserPublic, responses=_error_responses, summary="사용자 수정")
async def update_user(user_id: str, payload: UserUpdate, service: UserService = Depends(get_user_service)):
    user = await service.update_user(
        user_id,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        password_confirmation=payload.password_confirmation,
    )
    if user is None:
        raise _not_found()
    return _public(user)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="사용자 삭제")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    if not await service.delete_user(user_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

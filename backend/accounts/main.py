# FastAPI 진입점
# - Beanie ODM 초기화 (MongoDB, 이메일 unique 인덱스 생성 포함)
# - 라우터 라우팅
# - CORS 설정
# - 검증 실패 / 저장소 제약 위반 예외를 HTTP 응답으로 변환

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie

from .core.config import settings
from .core.exceptions import StorageConstraintViolation, UserValidationError
from .models.user import User
from .services.user_validation import errors_by_field
from .api.v1.auth import router as auth_router
from .api.v1.users import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="사용자 계정 API",
    description="이름/이메일/비밀번호 사용자 레코드 정규화, 검증, 저장",
    version=settings.APP_VERSION
)

origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Beanie 초기화 (앱 시작 시 1회)
# 연결 실패 시에도 서버는 시작되지만 /api/v1 사용자 기능은 사용할 수 없습니다.
@app.on_event("startup")
async def app_init():
    try:
        client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=5000)
        await client.admin.command('ping')
        db = client.get_default_database()
        await init_beanie(database=db, document_models=[User])
        logger.info("MongoDB 연결 성공: %s", settings.MONGODB_URI)
    except Exception as e:
        logger.warning("MongoDB 연결 실패: %s", e)
        logger.info("서버는 계속 시작됩니다. 사용자 기능은 MongoDB 연결 후 사용할 수 있습니다. URI: %s", settings.MONGODB_URI)

@app.exception_handler(UserValidationError)
async def user_validation_error_handler(request: Request, exc: UserValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": "Validation failed", "errors": errors_by_field(exc.errors)},
    )

@app.exception_handler(StorageConstraintViolation)
async def storage_constraint_handler(request: Request, exc: StorageConstraintViolation):
    logger.warning("저장소 제약 위반: %s", exc)
    return JSONResponse(status_code=409, content={"detail": "Could not save, try again"})

# 동작 확인용 엔드포인트
@app.get("/test", response_class=HTMLResponse)
async def test():
    return "Test, test, 1, 2, 3. It works!"

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}

# API v1 라우터 등록
app.include_router(auth_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")

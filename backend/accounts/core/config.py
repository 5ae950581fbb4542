# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트 디렉토리 경로 (backend/accounts/core/config.py 기준 3단계 상위)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "accounts"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    MONGODB_URI: str = "mongodb://localhost:27017/accounts"

    CORS_ALLOW_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # 비밀번호 최소 길이. 사용자 검증 규칙에서 사용합니다.
    PASSWORD_MIN_LENGTH: int = Field(default=6, ge=1, description="평문 비밀번호 최소 길이")
    # bcrypt work factor. 테스트에서는 환경변수로 낮춰서 사용합니다.
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31, description="bcrypt 해시 라운드 수")

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()

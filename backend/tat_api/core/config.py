# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from pydantic import Field

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/tat_api/core/config.py에 있으므로,
# 4단계 상위(core → tat_api → backend → 루트)로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "tat-system"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # MongoDB 연결 정보. 데이터베이스 이름은 URI와 별도로 지정합니다.
    MONGODB_URI: str = Field(default="mongodb://localhost:27017", description="MongoDB 연결 문자열")
    DATABASE_NAME: str = "tat_system"
    MONGODB_TIMEOUT_MS: int = 5000
    # 시작 시 ping 재시도 횟수 (tenacity)
    DB_CONNECT_RETRIES: int = 3

    CORS_ALLOW_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # 목록 API 페이지네이션
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100

    PASSWORD_MIN_LENGTH: int = 6

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()

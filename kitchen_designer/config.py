"""애플리케이션 설정"""
from pathlib import Path
from pydantic_settings import BaseSettings
from typing import List

# 프로젝트 루트 디렉토리
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """환경변수 기반 설정"""

    # API Keys (빈 값이면 /health 에서 미설정으로 보고)
    gemini_api_key: str = ""

    # Application
    app_name: str = "AI Kitchen Designer API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    public_base_url: str = ""

    # CORS
    cors_origins: List[str] = [
        "https://urbanwoodspace.com",
        "https://www.urbanwoodspace.com",
        "http://localhost:3000",
    ]

    # File Upload
    max_upload_size_mb: int = 20
    upload_dir: str = "uploads"

    # Gemini API
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_image_model: str = "gemini-2.5-flash-image"

    # Rate limiting (IP당 시간당 요청 수)
    rate_limit_requests: int = 10
    rate_limit_window_seconds: int = 3600

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    @property
    def upload_path(self) -> Path:
        """업로드/생성 이미지 저장 경로 (상대 경로는 프로젝트 루트 기준)"""
        path = Path(self.upload_dir)
        return path if path.is_absolute() else BASE_DIR / path

    @property
    def log_path(self) -> Path:
        """로그 파일 디렉토리 (상대 경로는 프로젝트 루트 기준)"""
        path = Path(self.log_dir)
        return path if path.is_absolute() else BASE_DIR / path

    class Config:
        env_file = ".env"
        case_sensitive = False


# 전역 설정 인스턴스
settings = Settings()

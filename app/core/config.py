import os

from dotenv import load_dotenv  # .env 파일 로드 지원

load_dotenv()

# 데이터베이스 연결 URL
DATABASE_URL = os.getenv("DATABASE_URL")

# 세션 쿠키 서명 키 (JWT 서명에 사용)
SECRET_KEY = os.getenv("SECRET_KEY", "default_secret_key_for_safety")
ALGORITHM = os.getenv("ALGORITHM", "HS256")

# 세션 쿠키 설정
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "company_slug")
SESSION_MAX_AGE_DAYS = int(os.getenv("SESSION_MAX_AGE_DAYS", "7"))

# 현재 실행 환경 구분용 변수
ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
IS_PRODUCTION = ENVIRONMENT == "production"  # secure 쿠키 여부
IS_DEVELOPMENT = ENVIRONMENT == "development"  # 시드 API 허용 여부

# 공개 페이지 URL (구조화 데이터, canonical URL 생성에 사용)
APP_URL = os.getenv("APP_URL", "").rstrip("/")

# CORS 허용 도메인 (콤마 구분)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# 로그 디렉토리
LOG_DIR = os.getenv("LOG_DIR", "logs")

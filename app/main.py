import logging
from contextlib import asynccontextmanager
from urllib.parse import quote

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core import logger as log_config  # noqa: F401  루트 로거 설정
from app.core.config import CORS_ORIGINS, ENVIRONMENT
from app.core.db import dispose_engine
from app.core.exceptions import CareersError, LoginRequired
from app.domains.auth.router import router as auth_router
from app.domains.careers.router import router as careers_router
from app.domains.companies.router import router as companies_router
from app.domains.seed.router import router as seed_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Careers Page Builder 시작 (environment={ENVIRONMENT})")
    yield
    await dispose_engine()


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """예상하지 못한 예외를 500 JSON 으로 변환 (CORS 미들웨어 안쪽에서 동작)"""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"처리되지 않은 예외: {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error"},
            )


# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(title="Careers Page Builder", version="0.1.0", lifespan=lifespan)

# 나중에 추가한 미들웨어가 바깥쪽: 500 응답에도 CORS 헤더가 붙음
app.add_middleware(UnhandledErrorMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True, # 세션 쿠키를 포함한 요청 허용
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- 예외 핸들러 ---

@app.exception_handler(CareersError)
async def careers_error_handler(request: Request, exc: CareersError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    # 로그인 후 원래 가려던 페이지로 돌아올 수 있도록 경로 전달
    return RedirectResponse(
        url=f"/login?redirect={quote(exc.redirect_to, safe='/')}",
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(loc) for loc in first.get("loc", ()) if loc != "body")
    message = f"Invalid {field}" if field else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": message,
            "detail": [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in errors],
        },
    )


@app.get("/")
async def root():
    return {"message": f"Careers Page Builder in {ENVIRONMENT} environment"}


# /{company_slug}/... 형태의 페이지 라우터는 마지막에 등록
app.include_router(auth_router)
app.include_router(companies_router)
app.include_router(seed_router)
app.include_router(careers_router)


class CSPMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["Content-Security-Policy"] = "upgrade-insecure-requests"
        return response

app.add_middleware(CSPMiddleware)

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .ai_services import AIService
from .config import Settings
from .errors import ResumeBuilderError
from .providers import ProviderSelector, describe_active_provider
from .schemas import ErrorOut, HealthOut

load_dotenv()
logger = logging.getLogger(__name__)

# Baseline hardening headers sent on every response
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Opener-Policy": "same-origin",
}


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("resume_builder").setLevel(settings.log_level)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorOut(message=message).model_dump())


def _log_startup_diagnostics(settings: Settings) -> None:
    # Key lengths only; secrets never reach the log
    provider = describe_active_provider(settings)
    model = f", model: {settings.llm_model}" if settings.llm_model else ""
    logger.info(f"LLM provider: {provider}{model}")
    lengths = " ".join(f"{name.split('_')[0]}:{n}" for name, n in settings.key_lengths().items())
    logger.info(f"Key lengths -> {lengths}")


def _register_error_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(ResumeBuilderError)
    async def resume_builder_error(request: Request, exc: ResumeBuilderError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return _error(400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error(404, "Route not found")
        return _error(exc.status_code, str(exc.detail))

    # slowapi's middleware invokes this handler synchronously
    def rate_limited(request: Request, exc: RateLimitExceeded):
        return _error(429, "Too many requests, please try again later.")

    app.add_exception_handler(RateLimitExceeded, rate_limited)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error(500, str(exc) if settings.debug else "Internal server error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log_startup_diagnostics(settings)
        yield

    app = FastAPI(title="AI Resume Builder", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.ai_service = AIService(ProviderSelector(settings), timeout=settings.llm_timeout)

    # One budget per client address shared by every route
    app.state.limiter = Limiter(key_func=get_remote_address, application_limits=[settings.rate_limit])
    app.add_middleware(SlowAPIMiddleware)

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        length = request.headers.get("content-length")
        if length and length.isdigit() and int(length) > settings.max_body_bytes:
            return _error(413, "Request body too large")
        return await call_next(request)

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app, settings)

    @app.get("/api/health", response_model=HealthOut)
    def health():
        return HealthOut(status="ok")

    from .api.routes_resume import router as resume_router
    from .api.routes_career import router as career_router
    app.include_router(resume_router)
    app.include_router(career_router)

    # Browser client
    if os.path.isdir(settings.static_dir):
        index_path = os.path.join(settings.static_dir, "index.html")

        @app.get("/", include_in_schema=False)
        def index():
            if not os.path.isfile(index_path):
                raise HTTPException(404)
            return FileResponse(index_path)

        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    return app


_settings = Settings.from_env()
configure_logging(_settings)
app = create_app(_settings)


def run():
    import uvicorn
    logger.info(f"AI Resume Builder server running on port {_settings.port}")
    uvicorn.run(app, host=_settings.host, port=_settings.port)


if __name__ == "__main__":
    run()

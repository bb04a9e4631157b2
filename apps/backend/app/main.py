from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from djkit import ConfigurationError, setup_logging
from app.api import proxy
from app.api.proxy import validation_message
from app.config import settings
import logging

logger = setup_logging("app", level=settings.LOG_LEVEL)
setup_logging("djkit", level=settings.LOG_LEVEL)

# httpx logs full request URLs, which carry the provider key on video downloads
logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("[backend] DJ Success Kit proxy starting...")
    if not settings.GEMINI_API_KEY:
        logger.warning("[backend] GEMINI_API_KEY is not set, generation requests will fail")
    yield
    # Shutdown
    logger.info("[backend] DJ Success Kit proxy shutting down...")

app = FastAPI(
    title="DJ Success Kit API",
    description="Generation proxy for DJ business templates, images and videos",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": validation_message(exc)},
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


@app.get("/")
async def root():
    return {"message": "DJ Success Kit API v0.1.0"}

@app.get("/health")
async def health():
    return {"status": "ok"}

# Include routers
app.include_router(proxy.router)

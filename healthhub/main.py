import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from healthhub.config import get_settings
from healthhub.database import close_db, init_db, ping_db
from healthhub.exceptions import AppError
from healthhub.rate_limit import limiter
from healthhub.responses import error_response, success_response
from healthhub.utils.logger import get_logger

from healthhub.routers import auth as auth_router
from healthhub.routers import customer as customer_router
from healthhub.routers import delivery_partner as delivery_partner_router
from healthhub.routers import medicine as medicine_router
from healthhub.routers import pathology as pathology_router
from healthhub.routers import pharmacy as pharmacy_router

logger = get_logger("main")
settings = get_settings()

app = FastAPI(
    title="HealthHub Admin API",
    debug=settings.APP_DEBUG,
)

app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(pathology_router.router)
app.include_router(pharmacy_router.router)
app.include_router(delivery_partner_router.router)
app.include_router(medicine_router.router)
app.include_router(customer_router.router)


# Error handlers: every failure leaves through here as {success: false, message, data: null}
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.warning(f"{exc.__class__.__name__} {exc.status_code}: {exc.message} - Path: {request.url.path}")
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP {exc.status_code}: {exc.detail} - Path: {request.url.path}")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(f"Validation error: {errors} - Path: {request.url.path}")
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"{field}: {first.get('msg')}" if field else "All required fields must be provided"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded: {exc.detail} - Path: {request.url.path}")
    return error_response(status.HTTP_429_TOO_MANY_REQUESTS, f"Rate limit exceeded: {exc.detail}")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.3f}s"
    )
    return response


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.get("/readyz")
async def readyz():
    if not await ping_db():
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Database not ready")
    return success_response(200, True, "ok", {"database": "up"})


@app.on_event("startup")
async def on_startup():
    logger.info("Starting application...")
    await init_db()
    logger.info("Database initialized")


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()
    logger.info("Shutting down application...")

import logging
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from drivigo.core.config import Settings, settings as default_settings
from drivigo.core.mailer import SMTPMailer
from drivigo.api.api import api_router
from drivigo.services.email_service import NotificationService
from drivigo.services.payment_service import PaymentService

# Logging Configuration
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{app.title} ready, allowed origins: {app.state.settings.cors_origins}")
    yield
    # Razorpay client and SMTP transport live for the whole process


def create_app(
    settings: Optional[Settings] = None,
    payment_service: Optional[PaymentService] = None,
    notification_service: Optional[NotificationService] = None,
) -> FastAPI:
    """
    Builds the application with its process-wide collaborators.

    Services default to ones built from `settings`; tests pass fakes instead.
    """
    settings = settings or default_settings

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.payment_service = payment_service or PaymentService.from_settings(settings)
    app.state.notification_service = notification_service or NotificationService(
        SMTPMailer.from_settings(settings),
        timeout=settings.SMTP_TIMEOUT_SECONDS,
    )

    allowed_origins = set(settings.cors_origins)

    # Runs inside CORSMiddleware, so preflights never get here
    @app.middleware("http")
    async def reject_unknown_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and origin.rstrip("/") not in allowed_origins:
            logger.warning(f"Rejected request from origin {origin} to {request.url.path}")
            return JSONResponse(status_code=403, content={"error": "Origin not allowed"})
        return await call_next(request)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
        if request.url.path == "/verify-payment":
            return PlainTextResponse("Payment verification failed", status_code=400)
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    # Global Exception Handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global exception: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Welcome to the drivigo server"

    return app


app = create_app()


def run():
    logger.info(f"Server is running on http://localhost:{default_settings.PORT}")
    uvicorn.run(
        "drivigo.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()

"""
metagen - Main Application

Collects a website description and streams back AI-generated HTML meta tags.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from metagen.config import get_settings
from metagen.exceptions import BadRequest, RequestFailed
from metagen.middleware import RequestLogMiddleware
from metagen.routes import router
from metagen.services.relay_service import get_relay_service
from metagen.utils.logging_setup import setup_logging

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger("metagen.app")

app = FastAPI(
    title=settings.app_name,
    description="Generate SEO meta tags for a website with AI, streamed as they are written",
    version="0.1.0",
    debug=settings.debug
)

# Middleware stack (order matters - last added runs first)
app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(BadRequest)
async def bad_request_handler(request: Request, exc: BadRequest):
    return PlainTextResponse(exc.reason, status_code=exc.status_code)


@app.exception_handler(RequestFailed)
async def request_failed_handler(request: Request, exc: RequestFailed):
    return PlainTextResponse(exc.reason, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Render schema failures as plain text like every other error."""
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part != "body")
        problems.append(f"{field}: {err['msg']}" if field else err["msg"])
    return PlainTextResponse("Invalid request: " + "; ".join(problems), status_code=422)


@app.on_event("startup")
async def startup_event():
    """Build the relay up front so a missing credential stops the process."""
    get_relay_service()
    logger.info("metagen starting...")
    logger.info("AI model: %s (%s)", settings.ai_model, settings.ai_base_url or "api.openai.com")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    logger.info("metagen shutting down...")


def main() -> None:
    import uvicorn
    uvicorn.run(
        "metagen.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    main()

"""
ManilaServe Chat Bridge - FastAPI application for the Manila City Hall virtual assistant.
Forwards user questions to Gemini with the city hall directory as grounding context.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth import APIKeyMiddleware
from config import Config
from routes import chat
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_logger.info(f"{Config.APP_TITLE} starting with model {Config.GEMINI_MODEL}")
    yield
    await HTTPClientManager.close_all()


app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def format_validation_error(error: dict) -> str:
    """Turn the first pydantic error into one readable sentence."""
    loc = error.get('loc') or []
    field = loc[-1] if loc else 'field'

    if error.get('type') == 'string_too_long':
        max_length = error.get('ctx', {}).get('max_length', 'unknown')
        current_length = len(error.get('input') or '')
        return f"Field '{field}' exceeds maximum length of {max_length} characters (current: {current_length})"

    return f"{field}: {error.get('msg', 'Validation error')}"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with user-friendly messages"""
    errors = exc.errors()
    app_logger.error(f"Validation error for {request.url}: {errors}")

    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": errors},
        )

    first_error = errors[0]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": [{
                "msg": format_validation_error(first_error),
                "type": first_error.get('type', ''),
                "loc": list(first_error.get('loc', []))
            }]
        },
    )


app.add_middleware(APIKeyMiddleware)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"message": f"{Config.APP_TITLE} is running"}

app.include_router(chat.router, tags=["chat"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

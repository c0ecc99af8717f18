import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.error_handlers import (
    conversion_error_handler,
    not_found_handler,
    unexpected_error_handler,
)
from api.router import router
from config import settings
from services.errors import ConversionError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Resume Converter API",
    description="Converts uploaded resumes into a fixed DOCX template",
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ConversionError, conversion_error_handler)
app.add_exception_handler(404, not_found_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

app.include_router(router)


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    logging.getLogger(__name__).info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run("main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()

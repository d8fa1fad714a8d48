"""FastAPI application for running the article functions locally."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from article_api.routers import articles
from articles.errors import BinderError
from common.cli_helpers import setup_logging
from common.config import get_config

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Binder API",
    description="Read-it-later article queue with spaced-repetition review",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["OPTIONS", "POST", "GET", "PUT"],
    allow_headers=["Content-Type"],
)

app.include_router(articles.router)


@app.exception_handler(BinderError)
async def binder_error_handler(request: Request, exc: BinderError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.get("/")
async def root():
    """API root - returns basic info."""
    return {
        "name": "Binder API",
        "version": "1.0.0",
        "docs": "/docs",
    }


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    config = get_config()
    uvicorn.run(
        "article_api.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=True,
    )


if __name__ == "__main__":
    main()

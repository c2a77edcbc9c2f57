import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from articles_api.config import settings
from articles_api.dependencies import get_article_service
from articles_api.logging_config import setup_logging
from articles_api.middleware import TimingMiddleware
from articles_api.routers import articles
from articles_api.schemas import HealthResponse
from articles_api.services.article_service import ArticleService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(
        "%s %s starting (env=%s, articles at %s)",
        settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV, settings.ARTICLES_PREFIX,
    )
    yield
    # Shutdown
    logger.info("%s stopped", settings.APP_NAME)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Undecodable request bodies are client errors: answer 400 instead of FastAPI's 422."""
    logger.info("Bad request on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "bad request", "errors": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        description="In-memory CRUD service for articles",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Middleware
    app.add_middleware(TimingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Routers
    app.include_router(articles.router)

    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return settings.WELCOME_MESSAGE

    @app.get("/health", response_model=HealthResponse)
    async def health(service: ArticleService = Depends(get_article_service)):
        return HealthResponse(
            status="healthy",
            version=settings.APP_VERSION,
            articles=await service.count_articles(),
        )

    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()

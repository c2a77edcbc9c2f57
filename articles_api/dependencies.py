"""
FastAPI dependencies that wire the layers together.

A single repository lives for the whole process; tests swap it out through
``app.dependency_overrides[get_article_service]``.
"""
from fastapi import Depends

from articles_api.repositories import ArticleRepository, InMemoryArticleRepository
from articles_api.services.article_service import ArticleService

_repository = InMemoryArticleRepository()


def get_article_repository() -> ArticleRepository:
    return _repository


def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> ArticleService:
    return ArticleService(repository)

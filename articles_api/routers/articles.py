import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from articles_api.config import settings
from articles_api.dependencies import get_article_service
from articles_api.exceptions import ArticleAlreadyExistsError, ArticleNotFoundError
from articles_api.schemas import Article, ArticleUpdate
from articles_api.services.article_service import ArticleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.ARTICLES_PREFIX, tags=["articles"])

@router.put("", response_class=PlainTextResponse)
async def add_article(data: Article, service: ArticleService = Depends(get_article_service)):
    try:
        await service.add_article(data)
    except ArticleAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return "ok"

@router.get("", response_model=list[Article])
async def list_articles(service: ArticleService = Depends(get_article_service)):
    return await service.list_articles()

@router.put("/{article_id}", response_class=PlainTextResponse)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
):
    if data.id and data.id != article_id:
        logger.debug("Ignoring body id=%r in favour of path id=%r", data.id, article_id)
    try:
        await service.update_article(data.to_article(article_id))
    except ArticleNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return "ok"

@router.get("/{article_id}", response_model=Article)
async def get_article(article_id: str, service: ArticleService = Depends(get_article_service)):
    try:
        return await service.get_article(article_id)
    except ArticleNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

@router.delete("/{article_id}", response_class=PlainTextResponse)
async def delete_article(article_id: str, service: ArticleService = Depends(get_article_service)):
    await service.delete_article(article_id)
    return "ok"

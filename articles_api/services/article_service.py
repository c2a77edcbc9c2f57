"""
Article service — business logic for the Article aggregate.

Design notes
------------
- The only rule enforced here is "no duplicate insert".  It is delegated to
  ``ArticleRepository.insert_if_absent`` so the existence check and the
  write happen under one repository lock; two concurrent adds of the same
  id cannot both succeed.
- Every other operation is a pass-through.  Repository errors
  (``ArticleNotFoundError``) propagate unchanged; translating them into
  HTTP status codes is the router's job.
"""
import logging

from articles_api.exceptions import ArticleAlreadyExistsError
from articles_api.repositories import ArticleRepository
from articles_api.schemas import Article

logger = logging.getLogger(__name__)


class ArticleService:
    def __init__(self, repository: ArticleRepository) -> None:
        self._repository = repository

    async def add_article(self, article: Article) -> None:
        """Store a new article. Raises ArticleAlreadyExistsError if the id is taken."""
        if not await self._repository.insert_if_absent(article):
            logger.info("Rejected duplicate article id=%r", article.id)
            raise ArticleAlreadyExistsError(article.id)
        logger.info("Added article id=%r", article.id)

    async def update_article(self, article: Article) -> None:
        """Replace an existing article. Raises ArticleNotFoundError if absent."""
        await self._repository.update(article)
        logger.info("Updated article id=%r", article.id)

    async def get_article(self, article_id: str) -> Article:
        return await self._repository.get_by_id(article_id)

    async def list_articles(self) -> list[Article]:
        return await self._repository.list_all()

    async def delete_article(self, article_id: str) -> None:
        """Delete an article; deleting an unknown id is not an error."""
        await self._repository.delete(article_id)
        logger.info("Deleted article id=%r", article_id)

    async def count_articles(self) -> int:
        return await self._repository.count()

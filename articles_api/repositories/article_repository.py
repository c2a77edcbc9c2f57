"""
Article storage.

``ArticleRepository`` is the port the service layer depends on;
``InMemoryArticleRepository`` is the only adapter.  The repository applies
no business rules: it stores, overwrites and removes whatever it is given.

Stored instances never leave the repository.  Every write stores a deep copy
and every read hands out a deep copy, so callers mutating the models they
hold cannot corrupt the store.
"""
import logging
import threading
from abc import ABC, abstractmethod

from articles_api.exceptions import ArticleNotFoundError
from articles_api.schemas import Article

logger = logging.getLogger(__name__)


class ArticleRepository(ABC):
    """Storage port for articles, keyed by ``Article.id``."""

    @abstractmethod
    async def insert(self, article: Article) -> None:
        """Store *article*, overwriting any existing entry with the same id."""
        ...

    @abstractmethod
    async def insert_if_absent(self, article: Article) -> bool:
        """Store *article* only if its id is free. Returns True if stored."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> None:
        """Overwrite an existing entry. Raises ArticleNotFoundError if absent."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> None:
        """Remove the entry if present; absent ids are ignored."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article:
        """Return the stored article. Raises ArticleNotFoundError if absent."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Article]:
        """Return every stored article, in no particular order."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...


class InMemoryArticleRepository(ArticleRepository):
    """
    Volatile dict-backed store.

    A single ``threading.Lock`` guards the dict.  Critical sections never
    await, so the lock is held only for the dict operation itself and works
    the same whether handlers run on the event loop or in the threadpool.
    """

    def __init__(self) -> None:
        self._articles: dict[str, Article] = {}
        self._lock = threading.Lock()

    async def insert(self, article: Article) -> None:
        with self._lock:
            self._articles[article.id] = article.model_copy(deep=True)
        logger.debug("Stored article id=%r", article.id)

    async def insert_if_absent(self, article: Article) -> bool:
        with self._lock:
            if article.id in self._articles:
                return False
            self._articles[article.id] = article.model_copy(deep=True)
        logger.debug("Stored new article id=%r", article.id)
        return True

    async def update(self, article: Article) -> None:
        with self._lock:
            if article.id not in self._articles:
                raise ArticleNotFoundError(article.id)
            self._articles[article.id] = article.model_copy(deep=True)
        logger.debug("Overwrote article id=%r", article.id)

    async def delete(self, article_id: str) -> None:
        with self._lock:
            removed = self._articles.pop(article_id, None)
        if removed is not None:
            logger.debug("Removed article id=%r", article_id)

    async def get_by_id(self, article_id: str) -> Article:
        with self._lock:
            article = self._articles.get(article_id)
            if article is None:
                raise ArticleNotFoundError(article_id)
            return article.model_copy(deep=True)

    async def list_all(self) -> list[Article]:
        with self._lock:
            return [a.model_copy(deep=True) for a in self._articles.values()]

    async def count(self) -> int:
        with self._lock:
            return len(self._articles)

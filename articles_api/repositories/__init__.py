from articles_api.repositories.article_repository import ArticleRepository, InMemoryArticleRepository

__all__ = ["ArticleRepository", "InMemoryArticleRepository"]

"""Domain errors raised by the repository and service layers."""


class ArticleError(Exception):
    """Base class for article domain errors."""


class ArticleNotFoundError(ArticleError):
    def __init__(self, article_id: str):
        self.article_id = article_id
        super().__init__(f"article not found: {article_id!r}")


class ArticleAlreadyExistsError(ArticleError):
    def __init__(self, article_id: str):
        self.article_id = article_id
        super().__init__(f"article already exists: {article_id!r}")

class ArticleError(Exception):
    """Base class for article lookup and content index failures."""


class ArticleNotFound(ArticleError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"Article not found: {slug}")
        self.slug = slug


class ContentIndexError(ArticleError):
    """The generated content index could not be read or validated."""

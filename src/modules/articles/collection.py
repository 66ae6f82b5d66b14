import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from src.modules.articles.exceptions import ContentIndexError
from src.modules.articles.schemas import Article

logger = logging.getLogger(__name__)

_INDEX_ADAPTER = TypeAdapter(list[Article])


class ArticleCollection:
    """Read-only set of articles produced by the content build step.

    Records keep the order of the generated index. Lookups go through a
    slug mapping built once at construction; on duplicate slugs the first
    record in index order is the one returned.
    """

    def __init__(self, articles: Iterable[Article]) -> None:
        self._articles: tuple[Article, ...] = tuple(articles)

        by_slug: dict[str, Article] = {}
        for article in self._articles:
            if article.slug_as_params in by_slug:
                logger.warning(
                    "Duplicate slug '%s' in content index; keeping the first record",
                    article.slug_as_params,
                )
                continue
            by_slug[article.slug_as_params] = article
        self._by_slug = MappingProxyType(by_slug)

    @classmethod
    def from_file(cls, path: str | Path) -> "ArticleCollection":
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ContentIndexError(f"Cannot read content index {path}: {exc}") from exc

        try:
            articles = _INDEX_ADAPTER.validate_json(data)
        except ValidationError as exc:
            raise ContentIndexError(
                f"Invalid content index {path}: {exc.error_count()} error(s)"
            ) from exc

        logger.info("Loaded %d articles from %s", len(articles), path)
        return cls(articles)

    def find(self, slug: str) -> Article | None:
        return self._by_slug.get(slug)

    def published(self) -> list[Article]:
        articles = [a for a in self._articles if a.published]
        return sorted(articles, key=lambda a: a.date, reverse=True)

    def __len__(self) -> int:
        return len(self._articles)

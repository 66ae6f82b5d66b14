from collections.abc import Sequence
from pathlib import Path

from src.config.settings import settings
from src.modules.articles.collection import ArticleCollection
from src.modules.articles.contracts import (
    ArticleMetadataContract,
    ArticleResolverContract,
)
from src.modules.articles.schemas import (
    Article,
    ArticleMetadata,
    OpenGraphMetadata,
    TwitterMetadata,
)

ARTICLES_PATH = "/articles"
OPEN_GRAPH_TYPE = "article"
TWITTER_CARD = "summary_large_image"


class ArticleService(ArticleResolverContract, ArticleMetadataContract):
    def __init__(
        self,
        collection: ArticleCollection | None = None,
        site_url: str | None = None,
    ) -> None:
        self._collection = collection if collection is not None else ArticleCollection([])
        self._site_url = (site_url or settings.site_url).rstrip("/")

    @property
    def collection(self) -> ArticleCollection:
        return self._collection

    def load(self, path: str | Path) -> None:
        self._collection = ArticleCollection.from_file(path)

    # ── Resolution ──────────────────────────────────────────────

    def resolve(self, slug_segments: Sequence[str]) -> Article | None:
        return self._collection.find("/".join(slug_segments))

    def list_published(self) -> list[Article]:
        return self._collection.published()

    # ── Metadata ────────────────────────────────────────────────

    def canonical_url(self, article: Article) -> str:
        return f"{self._site_url}{ARTICLES_PATH}/{article.slug_as_params}"

    def build_metadata(self, article: Article | None) -> ArticleMetadata | None:
        # None lets the page fall back to the site-wide defaults.
        if article is None:
            return None

        return ArticleMetadata(
            title=article.title,
            description=article.description,
            open_graph=OpenGraphMetadata(
                title=article.title,
                description=article.description,
                type=OPEN_GRAPH_TYPE,
                published_time=article.date,
                url=self.canonical_url(article),
            ),
            twitter=TwitterMetadata(
                card=TWITTER_CARD,
                title=article.title,
                description=article.description,
            ),
        )


article_service = ArticleService()

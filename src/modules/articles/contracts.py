from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.modules.articles.schemas import Article, ArticleMetadata


class ArticleResolverContract(ABC):
    @abstractmethod
    def resolve(self, slug_segments: Sequence[str]) -> Article | None: ...


class ArticleMetadataContract(ABC):
    @abstractmethod
    def build_metadata(self, article: Article | None) -> ArticleMetadata | None: ...

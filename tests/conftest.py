import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.config.settings import settings
from src.modules.articles.collection import ArticleCollection
from src.modules.articles.schemas import Article
from src.modules.articles.service import ArticleService

SITE_URL = "https://example.dev"


def _record(slug: str, title: str, date: str, **extra) -> dict:
    record = {
        "slugAsParams": slug,
        "title": title,
        "date": date,
        "timeToRead": 3,
        "body": {"code": f"<p>{title} body</p>"},
    }
    record.update(extra)
    return record


@pytest.fixture
def records() -> list[dict]:
    return [
        _record(
            "authentication-nextjs",
            "Authentication in Next.js",
            "2023-09-19T00:00:00.000Z",
            description="NextAuth with Prisma and PostgreSQL",
            timeToRead=5,
            body={"code": "<h2>Getting started</h2><p>Install next-auth.</p>"},
        ),
        _record(
            "guides/deploy",
            "Deploying to Vercel",
            "2023-10-02T00:00:00.000Z",
            timeToRead=4.6,
        ),
        _record("hello-world", "Hello World", "2023-08-02"),
        _record("drafts/upcoming", "Upcoming", "2024-01-05T00:00:00Z", published=False),
    ]


@pytest.fixture
def collection(records: list[dict]) -> ArticleCollection:
    return ArticleCollection(Article.model_validate(r) for r in records)


@pytest.fixture
def service(collection: ArticleCollection) -> ArticleService:
    return ArticleService(collection, site_url=SITE_URL)


@pytest.fixture
def index_file(tmp_path: Path, records: list[dict]) -> Path:
    path = tmp_path / "articles.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, index_file: Path):
    from src.main import app

    monkeypatch.setattr(settings, "content_index_path", str(index_file))
    with TestClient(app) as test_client:
        yield test_client

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from src.config.templates import templates
from src.modules.articles.dates import relative_date
from src.modules.articles.exceptions import ArticleNotFound
from src.modules.articles.renderer import render_body
from src.modules.articles.schemas import ArticleMetadata
from src.modules.articles.service import article_service

logger = logging.getLogger(__name__)

router = APIRouter()
api_router = APIRouter()

templates.env.filters["relative_date"] = relative_date
templates.env.filters["mdx"] = render_body


def _split_slug(slug: str) -> list[str]:
    return slug.split("/")


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"articles": article_service.list_published(), "metadata": None},
    )


@router.get("/articles/{slug:path}", response_class=HTMLResponse)
async def article_page(request: Request, slug: str):
    article = article_service.resolve(_split_slug(slug))
    if article is None:
        raise ArticleNotFound(slug)

    return templates.TemplateResponse(
        request,
        "article.html",
        {
            "article": article,
            "metadata": article_service.build_metadata(article),
        },
    )


@api_router.get("/{slug:path}/metadata", response_model=ArticleMetadata)
async def article_metadata(slug: str):
    metadata = article_service.build_metadata(
        article_service.resolve(_split_slug(slug))
    )
    if metadata is None:
        logger.info("No metadata for unknown article '%s'", slug)
        raise HTTPException(status_code=404, detail="Article not found")
    return metadata

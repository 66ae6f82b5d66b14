import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from src.config.settings import settings
from src.config.templates import templates
from src.modules.articles.exceptions import ArticleNotFound
from src.modules.articles.router import api_router as articles_api_router
from src.modules.articles.router import router as articles_router
from src.modules.articles.service import article_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    article_service.load(settings.content_index_path)
    logger.info("Serving %d articles", len(article_service.collection))
    yield


app = FastAPI(title="Articles", lifespan=lifespan)

# Pages
app.include_router(articles_router, tags=["articles"])

# API routes
app.include_router(articles_api_router, prefix="/api/articles", tags=["articles"])


@app.exception_handler(ArticleNotFound)
async def article_not_found(request: Request, exc: ArticleNotFound) -> HTMLResponse:
    logger.info("Article not found: %s", exc.slug)
    return templates.TemplateResponse(
        request, "not_found.html", {"metadata": None}, status_code=404
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.app_host, port=settings.app_port)

"""Articles API views - thin layer over services."""

from app.container import container
from app.models.articles import Article
from web.api.errors import NotFoundError, ValidationError, validate_article

from .schemas import ArticleResponse


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse(**article.to_dict())


async def create_article(author: str, content: str) -> ArticleResponse:
    """Create an article and index its words."""
    validate_article(author, content)
    article = await container.articles.create(author, content)
    return _to_response(article)


async def update_article(article_id: str, content: str) -> ArticleResponse:
    """Replace article content and reindex it."""
    if not isinstance(content, str):
        raise ValidationError("content must be a string")
    article = await container.articles.update(article_id, content)
    if article is None:
        raise NotFoundError(f"Article not found: {article_id}")
    return _to_response(article)


async def get_article(article_id: str) -> ArticleResponse:
    """Get an article by id."""
    article = await container.articles.get(article_id)
    if article is None:
        raise NotFoundError(f"Article not found: {article_id}")
    return _to_response(article)

"""Articles API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class ArticleResponse(BaseModel):
    """Stored article."""

    id: str
    author: str
    content: str
    created_at: datetime
    updated_at: datetime

"""Article model."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity

ARTICLE_DDL = """
CREATE TABLE IF NOT EXISTS article (
    id VARCHAR PRIMARY KEY,
    author VARCHAR NOT NULL,
    content VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""


@dataclass
class Article(BaseEntity):
    """Free-text article written by an author."""

    id: str
    author: str
    content: str
    created_at: datetime
    updated_at: datetime

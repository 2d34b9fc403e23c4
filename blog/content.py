# blog/content.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from flask import current_app

EXTENSION_KEY = "content_store"


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    content: str
    author: str
    date: str  # YYYY-MM-DD, kept as text
    excerpt: str


@dataclass(frozen=True)
class SiteInfo:
    title: str
    description: str
    author: str


@dataclass(frozen=True)
class ContentStore:
    """Read-only posts (in display order) plus the site metadata."""

    posts: tuple[Post, ...]
    site_info: SiteInfo

    def __post_init__(self):
        seen = set()
        for post in self.posts:
            if post.id <= 0:
                raise ValueError(f"Post id must be positive: {post.id}")
            if post.id in seen:
                raise ValueError(f"Duplicate post id: {post.id}")
            seen.add(post.id)


# ---------------------------------------------------------------------
# Sample data (in a real app, this would come from a database)
# ---------------------------------------------------------------------
SAMPLE_POSTS = (
    Post(
        id=1,
        title="Getting Started with EJS",
        content="EJS is a simple templating language that lets you generate HTML markup with plain JavaScript...",
        author="John Doe",
        date="2024-01-15",
        excerpt="Learn the basics of EJS templating engine",
    ),
    Post(
        id=2,
        title="Advanced EJS Techniques",
        content="Once you master the basics, you can explore more advanced features like custom filters and helpers...",
        author="Jane Smith",
        date="2024-01-20",
        excerpt="Explore advanced EJS features and best practices",
    ),
    Post(
        id=3,
        title="Building Dynamic Websites",
        content="Dynamic websites respond to user input and display different content based on various conditions...",
        author="Mike Johnson",
        date="2024-01-25",
        excerpt="Create interactive and dynamic web experiences",
    ),
)

SAMPLE_SITE_INFO = SiteInfo(
    title="My EJS Blog",
    description="A simple blog built with Express and EJS",
    author="Your Name",
)


def build_content_store(
    posts: Optional[Iterable[Post]] = None,
    site_info: Optional[SiteInfo] = None,
) -> ContentStore:
    return ContentStore(
        posts=tuple(SAMPLE_POSTS if posts is None else posts),
        site_info=site_info or SAMPLE_SITE_INFO,
    )


def get_content_store() -> ContentStore:
    return current_app.extensions[EXTENSION_KEY]

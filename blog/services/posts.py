# blog/services/posts.py
import re
from typing import Iterable, Optional

from blog.content import Post

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_post_id(raw: str) -> Optional[int]:
    # anything that is not a plain base-10 integer can't match a post
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def find_post_by_id(posts: Iterable[Post], post_id: Optional[int]) -> Optional[Post]:
    """Return the first post whose id equals ``post_id``, else None."""
    if post_id is None:
        return None
    for post in posts:
        if post.id == post_id:
            return post
    return None

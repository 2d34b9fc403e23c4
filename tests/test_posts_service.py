"""Tests for post id parsing and lookup."""

import pytest

from blog.content import SAMPLE_POSTS
from blog.services.posts import find_post_by_id, parse_post_id


@pytest.mark.parametrize("post", SAMPLE_POSTS, ids=lambda p: f"post-{p.id}")
def test_every_post_is_found_by_its_id(post):
    assert find_post_by_id(SAMPLE_POSTS, post.id) is post


@pytest.mark.parametrize("post_id", [0, -1, 4, 99])
def test_unknown_id_returns_none(post_id):
    assert find_post_by_id(SAMPLE_POSTS, post_id) is None


def test_none_id_returns_none():
    assert find_post_by_id(SAMPLE_POSTS, None) is None


def test_empty_posts():
    assert find_post_by_id((), 1) is None


@pytest.mark.parametrize("raw, expected", [("2", 2), ("002", 2), ("-3", -3), ("+1", 1)])
def test_parse_numeric(raw, expected):
    assert parse_post_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "2abc", "1.5", " 1", "1_0", "²", "1" * 5000])
def test_parse_rejects_non_numeric(raw):
    assert parse_post_id(raw) is None

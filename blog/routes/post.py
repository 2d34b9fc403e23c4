# blog/routes/post.py
from flask import Blueprint, Response, render_template
from blog.content import get_content_store
from blog.services.posts import find_post_by_id, parse_post_id

bp = Blueprint("post", __name__, url_prefix="/post")

NOT_FOUND_BODY = "Post not found"


@bp.get("/<post_id>")
def detail(post_id):
    store = get_content_store()
    post = find_post_by_id(store.posts, parse_post_id(post_id))

    if post is None:
        return Response(NOT_FOUND_BODY, status=404, mimetype="text/plain")

    return render_template(
        "post.html",
        title=post.title,
        post=post,
        site_info=store.site_info,
        current_page="post",
    )

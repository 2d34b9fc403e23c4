# blog/routes/home.py
from flask import Blueprint, render_template
from blog.content import get_content_store

bp = Blueprint("home", __name__)

@bp.route("/")
def index():
    store = get_content_store()
    return render_template(
        "index.html",
        title="Home",
        posts=store.posts,
        site_info=store.site_info,
        current_page="home",
    )

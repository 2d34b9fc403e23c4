# blog/routes/about.py
from flask import Blueprint, render_template
from blog.content import get_content_store

bp = Blueprint("about", __name__)

@bp.route("/about")
def about():
    # static page; only the site metadata is needed
    return render_template(
        "about.html",
        title="About",
        site_info=get_content_store().site_info,
        current_page="about",
    )

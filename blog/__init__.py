# blog/__init__.py
import os
from flask import Flask

from blog.content import EXTENSION_KEY, build_content_store

DEFAULT_PORT = 3000


def create_app(config=None):
    # Resolve package dir and wire template/static explicitly
    BASE_DIR = os.path.dirname(__file__)
    app = Flask(
        __name__,
        template_folder=os.path.join(BASE_DIR, "templates"),
        static_folder=os.path.join(BASE_DIR, "static"),
    )

    # Basic config
    app.config["HOST"] = os.environ.get("BLOG_HOST", "127.0.0.1")
    app.config["PORT"] = int(os.environ.get("BLOG_PORT", DEFAULT_PORT))
    app.config["DEBUG"] = os.environ.get("BLOG_DEBUG", "").lower() in ("1", "true", "yes")
    if config:
        app.config.update(config)

    # Content is built once and only read afterwards
    store = app.config.get("CONTENT_STORE") or build_content_store()
    app.extensions[EXTENSION_KEY] = store
    app.logger.debug("Loaded %d posts for '%s'.", len(store.posts), store.site_info.title)

    # Blueprints
    from .routes.home import bp as home_bp
    from .routes.about import bp as about_bp
    from .routes.post import bp as post_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(about_bp)
    app.register_blueprint(post_bp)

    return app

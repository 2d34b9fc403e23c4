import pytest
from flask import template_rendered

from blog import create_app


@pytest.fixture
def app():
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def rendered(app):
    """Record (template name, context) for every template the app renders."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)

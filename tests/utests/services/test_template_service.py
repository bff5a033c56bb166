from unittest.mock import MagicMock

import pytest
from starlette.requests import Request

from encore_assets.services.encore_helper import EncoreHelper
from encore_assets.services.html_helper import MarkupHtmlHelper
from encore_assets.services.template_service import TemplateService

BUILD_DIR = "tests/resources/static/build"


def _encore_helper() -> EncoreHelper:
    return EncoreHelper.from_files(
        MarkupHtmlHelper(),
        f"{BUILD_DIR}/entrypoints.json",
        f"{BUILD_DIR}/manifest.json",
    )


@pytest.fixture
def request_stub() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


def test_render_layout(request_stub):
    template_service = TemplateService(
        jinja_template_directory="tests/resources/templates",
        encore_helper_factory=_encore_helper,
    )

    response = template_service.render_layout(
        request_stub, "index.html", "Home", {"message": "<hello>"}
    )
    body = response.body.decode()

    assert response.status_code == 200
    assert "<title>Home</title>" in body
    assert '<link rel="stylesheet" href="/build/app.3f1c2a.css">' in body
    assert '<script src="/build/runtime.9a8b7c.js" defer></script>' in body
    assert '<script src="/build/app.1d2e3f.js" defer></script>' in body
    assert '<img src="/build/images/logo.abc123.png" alt="Logo">' in body
    assert "<p>&lt;hello&gt;</p>" in body


def test_render_layout_creates_helper_per_render(request_stub):
    factory = MagicMock(side_effect=_encore_helper)
    template_service = TemplateService(
        jinja_template_directory="tests/resources/templates",
        encore_helper_factory=factory,
    )

    template_service.render_layout(request_stub, "index.html", "One", {})
    template_service.render_layout(request_stub, "index.html", "Two", {})

    assert factory.call_count == 2


def test_render_layout_with_given_helper(request_stub):
    factory = MagicMock()
    encore_helper = _encore_helper()
    template_service = TemplateService(
        jinja_template_directory="tests/resources/templates",
        encore_helper_factory=factory,
    )

    response = template_service.render_layout(
        request_stub, "index.html", "Home", {}, encore_helper=encore_helper
    )

    factory.assert_not_called()
    assert response.context["encore"] is encore_helper
    assert response.context["html"] is encore_helper.html_helper

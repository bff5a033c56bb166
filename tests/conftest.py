import json
from typing import Any, Callable, Dict
from unittest.mock import MagicMock

import pytest

from encore_assets.dependency_injection.config import get_config
from encore_assets.services.html_helper import HtmlHelper


@pytest.fixture
def config():
    yield get_config("tests/encore.test.conf")


@pytest.fixture
def entrypoints_json() -> Dict[str, Any]:
    return {"entrypoints": {"app": {"css": ["a.css"], "js": ["a.js"]}}}


@pytest.fixture
def manifest_json() -> Dict[str, str]:
    return {"build/logo.png": "/build/logo.abc123.png"}


@pytest.fixture
def write_json(tmp_path) -> Callable[[str, Any], str]:
    def _write_json(filename: str, content: Any) -> str:
        path = tmp_path / filename
        path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    return _write_json


@pytest.fixture
def entrypoints_path(write_json, entrypoints_json) -> str:
    return write_json("entrypoints.json", entrypoints_json)


@pytest.fixture
def manifest_path(write_json, manifest_json) -> str:
    return write_json("manifest.json", manifest_json)


@pytest.fixture
def html_helper() -> MagicMock:
    return MagicMock(spec=HtmlHelper)

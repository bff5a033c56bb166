import os

from encore_assets.dependency_injection.config import (
    build_dir,
    build_file_path,
    get_config,
)


def test_get_config_reads_test_config(config):
    assert config.get("app", "web_root") == "tests/resources/static"
    assert get_config("tests/encore.test.conf") is config


def test_build_dir_defaults_to_static():
    assert build_dir(None) == os.path.join("static", "build")
    assert build_dir("") == os.path.join("static", "build")
    assert build_dir("/var/www") == os.path.join("/var/www", "build")


def test_build_file_path_prefers_configured_path():
    actual = build_file_path("/srv/entrypoints.json", "/var/www", "entrypoints.json")

    assert actual == "/srv/entrypoints.json"


def test_build_file_path_defaults_below_web_root():
    assert build_file_path("", "/var/www", "manifest.json") == os.path.join(
        "/var/www", "build", "manifest.json"
    )
    assert build_file_path(None, None, "entrypoints.json") == os.path.join(
        "static", "build", "entrypoints.json"
    )

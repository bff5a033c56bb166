import configparser
import os
from typing import Union

from encore_assets.misc.utils import non_empty

_PATH = "encore.conf"
_CONFIG = None

DEFAULT_WEB_ROOT = "static"
DEFAULT_BUILD_DIR = "build"
DEFAULT_PUBLIC_PATH = "/build"


# pylint:disable=global-statement
def get_config(path=None) -> configparser.ConfigParser:
    """
    Use this method only when it's not possible to inject config variables
    """
    global _CONFIG
    global _PATH
    if path is None:
        path = _PATH
    if _CONFIG is None or _PATH != path:
        _PATH = path
        _CONFIG = configparser.ConfigParser()
        _CONFIG.read(_PATH)
    return _CONFIG


def build_dir(web_root: Union[str, None]) -> str:
    return os.path.join(non_empty(web_root) or DEFAULT_WEB_ROOT, DEFAULT_BUILD_DIR)


def build_file_path(
    configured_path: Union[str, None], web_root: Union[str, None], filename: str
) -> str:
    """
    The configured path when set, otherwise ``filename`` in the build
    directory below the web root.
    """
    return non_empty(configured_path) or os.path.join(build_dir(web_root), filename)

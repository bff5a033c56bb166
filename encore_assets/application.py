# pylint: disable=c-extension-no-member
import logging
from configparser import ConfigParser
from typing import Callable, List, Tuple, Type, Union

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from encore_assets.dependency_injection.config import (
    DEFAULT_PUBLIC_PATH,
    build_dir,
    get_config,
)
from encore_assets.dependency_injection.container import Container
from encore_assets.exceptions.exception_handlers import manifest_load_exception_handler
from encore_assets.exceptions.manifest_exceptions import ManifestLoadError
from encore_assets.routers.health_router import health_router

_exception_handlers: List[Tuple[Union[int, Type[Exception]], Callable]] = [
    (ManifestLoadError, manifest_load_exception_handler),
]


def kwargs_from_config():
    config = get_config()

    kwargs = {
        "host": config.get("uvicorn", "host"),
        "port": config.getint("uvicorn", "port"),
        "reload": config.getboolean("uvicorn", "reload"),
        "proxy_headers": True,
        "workers": config.getint("uvicorn", "workers"),
    }

    reload_includes = config.get("uvicorn", "reload_includes", fallback=None)
    if reload_includes is not None and reload_includes != "":
        kwargs["reload_includes"] = reload_includes.split(" ")
    return kwargs


def _add_exception_handlers(fastapi: FastAPI):
    for tup in _exception_handlers:
        fastapi.add_exception_handler(tup[0], tup[1])


def run():
    uvicorn.run(
        "encore_assets.application:create_fastapi_app",
        factory=True,
        **kwargs_from_config(),
    )


def create_fastapi_app(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> FastAPI:
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    configured_loglevel = _config.get("app", "loglevel").upper()
    loglevel = logging.getLevelName(configured_loglevel)

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {configured_loglevel}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    modules = [
        "encore_assets.routers.health_router",
    ]
    container.config.from_dict(
        {section: dict(_config[section]) for section in _config.sections()}
    )

    public_path = (
        _config.get("encore", "public_path", fallback=None) or DEFAULT_PUBLIC_PATH
    )
    web_root = _config.get("app", "web_root", fallback=None)

    fastapi = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    fastapi.include_router(health_router)
    fastapi.mount(
        public_path,
        StaticFiles(directory=build_dir(web_root), check_dir=False),
        name="build",
    )
    container.wire(modules=modules)
    fastapi.container = container  # type: ignore
    _add_exception_handlers(fastapi)
    return fastapi

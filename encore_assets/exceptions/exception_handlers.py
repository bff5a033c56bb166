import logging

from fastapi import Request
from starlette.responses import JSONResponse

from encore_assets.exceptions.manifest_exceptions import ManifestLoadError

log = logging.getLogger(__name__)


async def manifest_load_exception_handler(
    request: Request, exception: ManifestLoadError
) -> JSONResponse:
    log.error("Unable to render %s: %s", request.url.path, exception.error_description)
    return JSONResponse(
        content={
            "error": "server_error",
            "error_description": "Something went wrong",
        },
        status_code=500,
    )

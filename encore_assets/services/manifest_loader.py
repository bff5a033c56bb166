import json
import logging
from typing import Any

from pydantic import ValidationError

from encore_assets.exceptions.manifest_exceptions import (
    InvalidManifestFormat,
    ManifestFileNotFound,
)
from encore_assets.misc.utils import file_content
from encore_assets.models.entrypoints import EntrypointsData, ManifestData

log = logging.getLogger(__name__)

ENTRYPOINTS_KIND = "entrypoints"
MANIFEST_KIND = "manifest"


def _read_json(path: str, kind: str) -> Any:
    try:
        content = file_content(path)
    except UnicodeDecodeError as unicode_error:
        raise InvalidManifestFormat(
            path=path, kind=kind, reason=unicode_error.reason
        ) from unicode_error
    if content is None:
        raise ManifestFileNotFound(path=path, kind=kind)
    try:
        return json.loads(content)
    except json.JSONDecodeError as decode_error:
        raise InvalidManifestFormat(
            path=path, kind=kind, reason=decode_error.msg
        ) from decode_error


def load_entrypoints(path: str) -> EntrypointsData:
    data = _read_json(path, ENTRYPOINTS_KIND)
    if not isinstance(data, dict) or "entrypoints" not in data:
        raise InvalidManifestFormat(
            path=path, kind=ENTRYPOINTS_KIND, reason="missing 'entrypoints' key"
        )
    try:
        entrypoints = EntrypointsData.model_validate(data)
    except ValidationError as validation_error:
        raise InvalidManifestFormat(
            path=path,
            kind=ENTRYPOINTS_KIND,
            reason=f"{validation_error.error_count()} validation error(s)",
        ) from validation_error
    log.debug(
        "Loaded %d entrypoints from %s", len(entrypoints.entrypoints), path
    )
    return entrypoints


def load_manifest(path: str) -> ManifestData:
    data = _read_json(path, MANIFEST_KIND)
    if not isinstance(data, dict):
        raise InvalidManifestFormat(
            path=path, kind=MANIFEST_KIND, reason="root is not an object"
        )
    try:
        manifest = ManifestData(assets=data)
    except ValidationError as validation_error:
        raise InvalidManifestFormat(
            path=path,
            kind=MANIFEST_KIND,
            reason=f"{validation_error.error_count()} validation error(s)",
        ) from validation_error
    log.debug("Loaded %d manifest assets from %s", len(manifest), path)
    return manifest

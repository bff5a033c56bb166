from dependency_injector.wiring import inject, Provide
from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from encore_assets.exceptions.manifest_exceptions import ManifestLoadError
from encore_assets.services.manifest_loader import load_entrypoints, load_manifest

health_router = APIRouter()


@health_router.get("/health")
@inject
async def health(
    entrypoints_path: str = Depends(Provide["services.entrypoints_path"]),
    manifest_path: str = Depends(Provide["services.manifest_path"]),
):
    try:
        entrypoints = load_entrypoints(entrypoints_path)
        manifest = load_manifest(manifest_path)
    except ManifestLoadError as load_error:
        return JSONResponse(
            content={
                "healthy": False,
                "error_description": load_error.error_description,
            },
            status_code=503,
        )
    return {
        "healthy": True,
        "entrypoints": len(entrypoints.entrypoints),
        "assets": len(manifest),
    }

from typing import Union


class ManifestLoadError(Exception):
    def __init__(self, *, path: str, error_description: str):
        super().__init__(error_description)
        self.path = path
        self.error_description = error_description


class ManifestFileNotFound(ManifestLoadError):
    def __init__(self, *, path: str, kind: str):
        super().__init__(
            path=path,
            error_description=f"Encore {kind} file not found: {path}",
        )


class InvalidManifestFormat(ManifestLoadError):
    def __init__(self, *, path: str, kind: str, reason: Union[str, None] = None):
        error_description = f"Invalid Encore {kind} format: {path}"
        if reason is not None:
            error_description = f"{error_description} ({reason})"
        super().__init__(path=path, error_description=error_description)
        self.reason = reason

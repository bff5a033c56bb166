from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Entrypoint(BaseModel):
    """
    The files Encore built for one entry, in the order they must be included.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    css: Tuple[str, ...] = ()
    js: Tuple[str, ...] = ()

    @field_validator("css", "js", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value


EMPTY_ENTRYPOINT = Entrypoint()


class EntrypointsData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    entrypoints: Dict[str, Entrypoint]

    def __contains__(self, entry_name: object) -> bool:
        return entry_name in self.entrypoints

    def get(self, entry_name: str) -> Entrypoint:
        return self.entrypoints.get(entry_name, EMPTY_ENTRYPOINT)

    def css_files(self, entry_name: str) -> List[str]:
        return list(self.get(entry_name).css)

    def js_files(self, entry_name: str) -> List[str]:
        return list(self.get(entry_name).js)


class ManifestData(BaseModel):
    """
    Logical (pre-build) asset path to the fingerprinted public path.
    """

    model_config = ConfigDict(frozen=True)

    assets: Dict[str, str]

    def __len__(self) -> int:
        return len(self.assets)

    def resolve(self, asset_path: str) -> str:
        return self.assets.get(asset_path, asset_path)

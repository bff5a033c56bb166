from typing import Any, List, Mapping, Optional, Sequence, Union

from encore_assets.models.entrypoints import EntrypointsData, ManifestData
from encore_assets.models.tag_options import LinkTagOptions, ScriptTagOptions
from encore_assets.services.html_helper import HtmlHelper
from encore_assets.services.manifest_loader import load_entrypoints, load_manifest


class EncoreHelper:
    """
    Resolves Encore build output for templates.

    Entries are looked up in ``entrypoints.json``, single assets in
    ``manifest.json``. Both are read once, when the helper is created, and the
    helper is meant to live for one render. Unknown entries render nothing and
    unknown assets resolve to themselves.
    """

    def __init__(
        self,
        html_helper: HtmlHelper,
        entrypoints: EntrypointsData,
        manifest: ManifestData,
    ):
        self._html_helper = html_helper
        self._entrypoints = entrypoints
        self._manifest = manifest

    @classmethod
    def from_files(
        cls, html_helper: HtmlHelper, entrypoints_path: str, manifest_path: str
    ) -> "EncoreHelper":
        return cls(
            html_helper=html_helper,
            entrypoints=load_entrypoints(entrypoints_path),
            manifest=load_manifest(manifest_path),
        )

    @property
    def html_helper(self) -> HtmlHelper:
        return self._html_helper

    def entry_exists(self, entry_name: str) -> bool:
        return entry_name in self._entrypoints

    def entry_css_files(self, entry_name: str) -> List[str]:
        return self._entrypoints.css_files(entry_name)

    def entry_js_files(self, entry_name: str) -> List[str]:
        return self._entrypoints.js_files(entry_name)

    def entry_link_tags(
        self, entry_name: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        css_files = self.entry_css_files(entry_name)
        if not css_files:
            return ""
        return self._html_helper.css(
            css_files, None, LinkTagOptions.merged(options).as_dict()
        )

    def entry_script_tags(
        self, entry_name: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        js_files = self.entry_js_files(entry_name)
        if not js_files:
            return ""
        return self._html_helper.script(
            js_files, ScriptTagOptions.merged(options).as_dict()
        )

    def asset(self, asset_path: str) -> str:
        """
        ``asset("build/images/logo.png")`` gives ``/build/images/logo.3eed42.png``
        when the manifest knows the file, the path itself otherwise.
        """
        return self._manifest.resolve(asset_path)

    def image(
        self, asset_path: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> str:
        return self._html_helper.image(self.asset(asset_path), attributes or {})

    def css(
        self,
        asset_paths: Union[str, Sequence[str]],
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        return self._html_helper.css(
            self._resolve_all(asset_paths), None, options or {}
        )

    def script(
        self,
        asset_paths: Union[str, Sequence[str]],
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        return self._html_helper.script(self._resolve_all(asset_paths), options or {})

    def _resolve_all(self, asset_paths: Union[str, Sequence[str]]) -> List[str]:
        if isinstance(asset_paths, str):
            asset_paths = [asset_paths]
        return [self.asset(asset_path) for asset_path in asset_paths]

import abc
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set

from markupsafe import Markup, escape

_ABSOLUTE_PREFIXES = ("/", "http://", "https://", "data:")


class HtmlHelper(abc.ABC):
    """
    Turns resolved asset paths into markup.
    """

    @abc.abstractmethod
    def css(
        self,
        paths: Sequence[str],
        media: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        pass

    @abc.abstractmethod
    def script(
        self, paths: Sequence[str], options: Optional[Mapping[str, Any]] = None
    ) -> str:
        pass

    @abc.abstractmethod
    def image(
        self, path: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> str:
        pass


def render_attributes(attributes: Mapping[str, Any]) -> str:
    rendered = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            rendered.append(f" {escape(name)}")
        else:
            rendered.append(f' {escape(name)}="{escape(value)}"')
    return "".join(rendered)


class MarkupHtmlHelper(HtmlHelper):
    """
    Default renderer for link, script and img tags.

    Tags rendered with ``inline`` set to False are not returned but collected
    in a named block (``css`` or ``script`` unless the ``block`` option says
    otherwise), to be written out later with :meth:`fetch`. Script files are
    emitted once per helper unless ``once`` is False.
    """

    def __init__(self, asset_base_url: str = "/"):
        self._asset_base_url = asset_base_url
        self._blocks: Dict[str, List[str]] = {}
        self._included_scripts: Set[str] = set()

    def url(self, path: str) -> str:
        if path.startswith(_ABSOLUTE_PREFIXES):
            return path
        return f"{self._asset_base_url.rstrip('/')}/{path}"

    def css(
        self,
        paths: Sequence[str],
        media: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Markup:
        attributes = dict(options or {})
        inline = attributes.pop("inline", True)
        block = attributes.pop("block", "css")
        rel = attributes.pop("rel", "stylesheet")

        tags = []
        for path in paths:
            tag_attributes = {"rel": rel, "href": self.url(path), "media": media}
            tag_attributes.update(attributes)
            tags.append(f"<link{render_attributes(tag_attributes)}>")
        return self._output(tags, inline, block)

    def script(
        self, paths: Sequence[str], options: Optional[Mapping[str, Any]] = None
    ) -> Markup:
        attributes = dict(options or {})
        inline = attributes.pop("inline", True)
        block = attributes.pop("block", "script")
        once = attributes.pop("once", True)

        tags = []
        for path in paths:
            src = self.url(path)
            if once and src in self._included_scripts:
                continue
            self._included_scripts.add(src)
            tag_attributes = {"src": src}
            tag_attributes.update(attributes)
            tags.append(f"<script{render_attributes(tag_attributes)}></script>")
        return self._output(tags, inline, block)

    def image(
        self, path: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> Markup:
        tag_attributes: Dict[str, Any] = {"src": self.url(path), "alt": ""}
        tag_attributes.update(attributes or {})
        return Markup(f"<img{render_attributes(tag_attributes)}>")

    def fetch(self, block: str) -> Markup:
        return Markup("\n".join(self._blocks.get(block, [])))

    def _output(self, tags: List[str], inline: Any, block: str) -> Markup:
        if inline:
            return Markup("\n".join(tags))
        self._blocks.setdefault(block, []).extend(tags)
        return Markup("")

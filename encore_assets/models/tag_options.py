from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="TagOptions")


class TagOptions(BaseModel):
    # caller supplied values are forwarded to the renderer as given
    model_config = ConfigDict(extra="allow")

    @classmethod
    def merged(cls: Type[T], overrides: Optional[Mapping[str, Any]] = None) -> T:
        return cls.model_validate(dict(overrides or {}))

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class LinkTagOptions(TagOptions):
    inline: Any = False


class ScriptTagOptions(TagOptions):
    defer: Any = True
    inline: Any = False

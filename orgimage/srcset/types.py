# orgimage/srcset/types.py
# Responsibility: Shapes of the data flowing between classifier, selector and builder.

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Protocol, TypedDict

# sizeKey -> url, e.g. {"lowMin": "https://.../tile-min.jpg"}
SizeMap = Dict[str, str]

# mediaType -> SizeMap, in the order media types were first seen
LinksByType = Dict[str, SizeMap]


class ClassifiedLink(Protocol):
    """
    Anything that exposes a target URL, a media type and class membership.
    Siren links implement this; so does ImageLink below.
    """

    @property
    def url(self) -> str: ...

    @property
    def media_type(self) -> str: ...

    def has_class(self, name: str) -> bool: ...


class ImageEntity(Protocol):
    """
    A hydrated image resource. `href` is only set on bare linked references.
    """

    href: Optional[str]

    def get_links_by_class(self, name: str) -> List[ClassifiedLink]: ...


@dataclass(frozen=True)
class ImageLink:
    """Plain ClassifiedLink for callers that do not hold Siren entities."""

    url: str
    media_type: str
    classes: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, url: str, media_type: str, classes: Iterable[str]) -> "ImageLink":
        return cls(url=url, media_type=media_type, classes=frozenset(classes))

    def has_class(self, name: str) -> bool:
        return name in self.classes


class PictureSource(TypedDict):
    type: str
    srcset: str

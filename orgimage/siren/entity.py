# orgimage/siren/entity.py
# Responsibility: Pydantic models for hydrated Siren entities and their links.

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class SirenLink(BaseModel):
    """
    A Siren navigational link. Implements the ClassifiedLink capability
    (url, media_type, has_class) used by the srcset classifier.
    """

    model_config = ConfigDict(populate_by_name=True)

    rel: List[str] = Field(default_factory=list)
    href: str
    class_: List[str] = Field(default_factory=list, alias="class")
    type: Optional[str] = None
    title: Optional[str] = None

    @property
    def url(self) -> str:
        return self.href

    @property
    def media_type(self) -> str:
        # Untyped links are grouped together under ""
        return self.type or ""

    def has_class(self, name: str) -> bool:
        return name in self.class_


class SirenEntity(BaseModel):
    """
    A Siren entity, either fully hydrated or a linked sub-entity.

    A linked sub-entity carries only `rel` and `href`; it must be fetched
    before its links can be read.
    """

    model_config = ConfigDict(populate_by_name=True)

    class_: List[str] = Field(default_factory=list, alias="class")
    rel: List[str] = Field(default_factory=list)
    properties: Dict[str, Any] = Field(default_factory=dict)
    entities: List["SirenEntity"] = Field(default_factory=list)
    links: List[SirenLink] = Field(default_factory=list)
    href: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None

    @field_validator("links", mode="before")
    @classmethod
    def drop_unparseable_links(cls, value: Any) -> List[SirenLink]:
        """
        Keeps the links that validate and drops the rest, so one broken
        link does not hide the entity's other links.
        """
        if not isinstance(value, list):
            return []

        links = []
        for item in value:
            try:
                links.append(SirenLink.model_validate(item))
            except ValidationError:
                continue
        return links

    def get_links_by_class(self, name: str) -> List[SirenLink]:
        """Returns every link carrying the given class, in document order."""
        return [link for link in self.links if link.has_class(name)]


SirenEntity.model_rebuild()

"""
Pydantic schema definitions for the catalog module.

These models mirror the parts of the PokeAPI JSON that the viewer
reads. Unknown fields are ignored, so the upstream payloads (which are
much larger) validate directly into them. A payload that lacks one of
the required fields fails validation, which the API client treats as a
failed request rather than a partial record.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ListEntry(BaseModel):
    """A ``(name, url)`` reference into the catalog, not yet resolved."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class CatalogPage(BaseModel):
    """One page of ``/pokemon/``. The viewer requests a single oversized page."""

    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[ListEntry]


class Sprites(BaseModel):
    # front_default is null for a handful of alternate forms
    front_default: Optional[str] = None


class TypeRef(BaseModel):
    name: str
    url: str = ""


class TypeSlot(BaseModel):
    slot: int = 0
    type: TypeRef


class DetailRecord(BaseModel):
    """The resolved view of one entry, as returned by ``/pokemon/{id}/``.

    ``sprite_url`` and ``type_names`` flatten the nested upstream shape
    for templates and the JSON API.
    """

    id: int
    name: str
    sprites: Sprites
    types: List[TypeSlot]

    @property
    def sprite_url(self) -> str:
        return self.sprites.front_default or ""

    @property
    def type_names(self) -> List[str]:
        return [slot.type.name for slot in self.types]


class CategoryMember(BaseModel):
    slot: int = 0
    pokemon: ListEntry


class CategoryPage(BaseModel):
    """The ``/type/{name}`` resource, reduced to its member list."""

    name: str = ""
    pokemon: List[CategoryMember]

    def entries(self) -> List[ListEntry]:
        """Unwrap the members into plain entries, preserving order."""
        return [member.pokemon for member in self.pokemon]


class CardPayload(BaseModel):
    """JSON form of a card's state, served by the details endpoint."""

    state: str
    name: str = ""
    url: str = ""
    id: Optional[int] = None
    sprite_url: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)


class FilterCategory(BaseModel):
    value: str
    label: str
    color: str

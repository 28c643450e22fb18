"""Home feed sections."""

from typing import Annotated, Literal

from pydantic import Field

from ytmkit.models.entities import CatalogModel, SearchResult


class CarouselSection(CatalogModel):
    """Shelf of mixed catalog tiles (songs, albums, playlists...)."""

    kind: Literal["carousel"] = "carousel"
    title: str
    contents: tuple[SearchResult, ...] = ()


class DescriptionSection(CatalogModel):
    """Text-only shelf."""

    kind: Literal["description"] = "description"
    title: str
    description: str


HomeSection = Annotated[
    CarouselSection | DescriptionSection, Field(discriminator="kind")
]

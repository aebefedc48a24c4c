"""Artefact Schemas — Pydantic models for the qm_data.json envelope.

Invariants:
    - Aliases carry the camelCase wire keys byte-for-byte (titleEN, objectNumber, ...)
    - Responses serialize by alias; Python code uses snake_case attributes
    - object_number is the natural key used for filtering
    - relatedWebpages / object3dEmbed entries are untyped passthrough

Design Decisions:
    - previous is opaque (Any): observed data never populates it
    - The envelope is decoded in full but only results leave the service
"""

from typing import Any

from pydantic import Field

from exhibits_api.schemas.common import Coordinates, DatasetModel


class Museum(DatasetModel):
    slug: str = ""
    label: str = ""
    label_en: str = Field(default="", alias="labelEN")
    label_ar: str = Field(default="", alias="labelAR")


class Weekday(DatasetModel):
    number: int = 0
    name: str = ""


class OpeningTime(DatasetModel):
    opening_at: str = Field(default="", alias="openingAt")
    closing_at: str = Field(default="", alias="closingAt")
    weekday: Weekday = Weekday()


class FocalPoint(DatasetModel):
    x: int = 0
    y: int = 0


class ObjectImage(DatasetModel):
    url: str = ""
    width: int = 0
    height: int = 0
    focal_point: FocalPoint = Field(default=FocalPoint(), alias="focalPoint")
    alt_text_en: str = Field(default="", alias="altTextEN")
    alt_text_ar: str = Field(default="", alias="altTextAR")
    credit_line_en: str = Field(default="", alias="creditLineEN")
    credit_line_ar: str = Field(default="", alias="creditLineAR")


class ObjectImages(DatasetModel):
    """Original and card-sized variants of an object's images."""
    original: list[ObjectImage] = []
    card: list[ObjectImage] = []


class Artefact(DatasetModel):
    """A museum object with bilingual metadata, museum, opening hours and images."""
    object_number: str = Field(default="", alias="objectNumber")
    title_en: str = Field(default="", alias="titleEN")
    title_ar: str = Field(default="", alias="titleAR")
    object_name_en: str = Field(default="", alias="objectNameEN")
    object_name_ar: str = Field(default="", alias="objectNameAR")
    artist_en: str = Field(default="", alias="artistEN")
    artist_ar: str = Field(default="", alias="artistAR")
    museum: Museum = Museum()
    opening_times: list[OpeningTime] = Field(default=[], alias="openingTimes")
    summary_en: str = Field(default="", alias="summaryEN")
    summary_ar: str = Field(default="", alias="summaryAR")
    object_images: ObjectImages = Field(default=ObjectImages(), alias="objectImages")
    related_webpages: list[Any] = Field(default=[], alias="relatedWebpages")
    object_3d_embed: list[Any] = Field(default=[], alias="object3dEmbed")
    coords: Coordinates = Coordinates()


class ArtefactEnvelope(DatasetModel):
    """Paginated wrapper around the artefact results list."""
    count: int = 0
    next: str | None = ""
    previous: Any = None
    results: list[Artefact] = []


def decode_artefact_envelope(data: bytes) -> ArtefactEnvelope:
    """Strictly decode qm_data.json contents."""
    return ArtefactEnvelope.model_validate_json(data, strict=True)

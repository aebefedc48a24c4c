"""Exhibit Schemas — Pydantic models for records in exhibits.json.

Invariants:
    - Field names are the wire keys (snake_case) consumers already depend on
    - exhibit_id is the natural key used for filtering (uniqueness not enforced)
    - audio_guide_link is the only nullable field; it serializes as null

Design Decisions:
    - Missing keys and nulls take zero values; wrong JSON types fail the decode
    - Unknown keys are ignored (pydantic default extra="ignore")
"""

from pydantic import TypeAdapter

from exhibits_api.schemas.common import Coordinates, DatasetModel, LocalizedString, Text


class Exhibit(DatasetModel):
    """A site/installation with bilingual text, media links, tags and coordinates."""
    exhibit_id: int = 0
    site_name: LocalizedString = LocalizedString()
    site_brief_description: LocalizedString = LocalizedString()
    name_en: str = ""
    name_ar: str = ""
    name: LocalizedString = LocalizedString()
    brief_description: LocalizedString = LocalizedString()
    generated_description: LocalizedString = LocalizedString()
    artist_description: LocalizedString = LocalizedString()
    artist_name: LocalizedString = LocalizedString()
    location_description: LocalizedString = LocalizedString()
    type: str = ""
    image_url: str = ""
    video_url: str = ""
    relevant_link: str = ""
    audio_guide_link: str | None = None
    location_url: str = ""
    tags: list[Text] = []
    coords: Coordinates = Coordinates()
    ownership: str = ""
    recreation_level: str = ""


ExhibitList = TypeAdapter(list[Exhibit])


def decode_exhibits(data: bytes) -> list[Exhibit]:
    """Strictly decode exhibits.json contents."""
    return ExhibitList.validate_json(data, strict=True)

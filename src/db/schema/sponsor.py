from datetime import datetime

from pydantic import BaseModel, ConfigDict

from db.model.sponsor import SponsorDB


class SponsorBase(BaseModel):
    name: str
    coop_duration: SponsorDB.CoopDuration
    image_url: str
    website_url: str
    sponsor_class: SponsorDB.SponsorClass


class SponsorSave(SponsorBase):
    pass


class SponsorUpdate(BaseModel):
    """Partial update of a sponsor. Fields left as None are not touched."""

    coop_duration: SponsorDB.CoopDuration | None = None
    image_url: str | None = None
    website_url: str | None = None
    sponsor_class: SponsorDB.SponsorClass | None = None


class Sponsor(SponsorBase):
    created_at: datetime | None = None
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes = True)

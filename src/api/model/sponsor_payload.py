from typing import Any

from pydantic import BaseModel, field_validator


def _trim(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip()
    return v


class SponsorUpdatePayload(BaseModel):
    coop_duration: str | None = None
    sponsor_image_url: str | None = None
    sponsor_website_url: str | None = None
    sponsor_class: str | None = None

    # noinspection PyNestedDecorators
    @field_validator(
        "coop_duration",
        "sponsor_image_url",
        "sponsor_website_url",
        "sponsor_class",
        mode = "before",
    )
    @classmethod
    def trim_strings(cls, v: Any) -> Any:
        """Trim whitespace from string values, preserve None and empty strings"""
        return _trim(v)


class SponsorPayload(SponsorUpdatePayload):
    # optional here so that the service reports which field is missing
    sponsor_name: str | None = None

    # noinspection PyNestedDecorators
    @field_validator("sponsor_name", mode = "before")
    @classmethod
    def trim_name(cls, v: Any) -> Any:
        return _trim(v)

from pydantic import BaseModel


class SponsorResponse(BaseModel):
    sponsor_name: str
    coop_duration: str
    sponsor_image_url: str
    sponsor_website_url: str
    sponsor_class: str

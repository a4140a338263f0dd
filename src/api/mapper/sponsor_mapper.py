from api.model.sponsor_response import SponsorResponse
from db.schema.sponsor import Sponsor


def domain_to_api(sponsor: Sponsor) -> SponsorResponse:
    return SponsorResponse(
        sponsor_name = sponsor.name,
        coop_duration = sponsor.coop_duration.value,
        sponsor_image_url = sponsor.image_url,
        sponsor_website_url = sponsor.website_url,
        sponsor_class = sponsor.sponsor_class.value,
    )

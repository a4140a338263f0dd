import unittest

from api.mapper.sponsor_mapper import domain_to_api
from db.model.sponsor import SponsorDB
from db.schema.sponsor import Sponsor


class SponsorMapperTest(unittest.TestCase):

    def test_domain_to_api(self):
        sponsor = Sponsor(
            name = "Acme",
            coop_duration = SponsorDB.CoopDuration.QUARTER_YEAR,
            image_url = "https://acme.example.com/logo.png",
            website_url = "https://acme.example.com",
            sponsor_class = SponsorDB.SponsorClass.PLATINUM,
        )

        response = domain_to_api(sponsor)

        self.assertEqual(response.sponsor_name, "Acme")
        self.assertEqual(response.coop_duration, "QUARTER_YEAR")
        self.assertEqual(response.sponsor_image_url, "https://acme.example.com/logo.png")
        self.assertEqual(response.sponsor_website_url, "https://acme.example.com")
        self.assertEqual(response.sponsor_class, "PLATINUM")
        self.assertEqual(
            set(response.model_dump().keys()),
            {"sponsor_name", "coop_duration", "sponsor_image_url", "sponsor_website_url", "sponsor_class"},
        )

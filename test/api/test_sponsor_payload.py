import unittest

from api.model.sponsor_payload import SponsorPayload, SponsorUpdatePayload


class SponsorPayloadTest(unittest.TestCase):

    def test_strings_are_trimmed(self):
        payload = SponsorPayload(
            sponsor_name = "  Acme ",
            coop_duration = " FULL_YEAR",
            sponsor_image_url = "acme.example.com/logo.png  ",
            sponsor_website_url = "\tacme.example.com\n",
            sponsor_class = "GOLD ",
        )

        self.assertEqual(payload.sponsor_name, "Acme")
        self.assertEqual(payload.coop_duration, "FULL_YEAR")
        self.assertEqual(payload.sponsor_image_url, "acme.example.com/logo.png")
        self.assertEqual(payload.sponsor_website_url, "acme.example.com")
        self.assertEqual(payload.sponsor_class, "GOLD")

    def test_all_fields_optional(self):
        payload = SponsorPayload()

        self.assertIsNone(payload.sponsor_name)
        self.assertIsNone(payload.coop_duration)

    def test_whitespace_only_becomes_empty(self):
        payload = SponsorUpdatePayload(coop_duration = "   ")

        self.assertEqual(payload.coop_duration, "")

    def test_update_payload_from_json(self):
        payload = SponsorUpdatePayload.model_validate({"sponsor_class": "SILVER", "sponsor_website_url": None})

        self.assertEqual(payload.sponsor_class, "SILVER")
        self.assertIsNone(payload.sponsor_website_url)

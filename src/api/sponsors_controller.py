from typing import Any

from api.mapper.sponsor_mapper import domain_to_api
from api.model.sponsor_payload import SponsorPayload, SponsorUpdatePayload
from db.schema.sponsor import Sponsor
from di.di import DI
from util.config import config
from util.error_codes import SPONSOR_NOT_FOUND, SPONSORS_NOT_FOUND
from util.errors import NotFoundError
from util.safe_printer_mixin import SafePrinterMixin


class SponsorsController(SafePrinterMixin):
    __di: DI

    def __init__(self, di: DI):
        super().__init__(config.verbose)
        self.__di = di

    def create_sponsor(self, payload: SponsorPayload) -> dict[str, Any]:
        self.sprint(f"Creating sponsor '{payload.sponsor_name}'")
        sponsor = self.__di.sponsor_service.create_sponsor(
            name = payload.sponsor_name,
            coop_duration = payload.coop_duration,
            image_url = payload.sponsor_image_url,
            website_url = payload.sponsor_website_url,
            sponsor_class = payload.sponsor_class,
        )
        return {
            "message": "Sponsor created",
            "sponsor": domain_to_api(sponsor).model_dump(),
        }

    def fetch_all_sponsors(self) -> dict[str, Any]:
        self.sprint("Fetching all sponsors")
        sponsors = self.__di.sponsor_service.find_all_sponsors()
        return {"sponsors": self.__to_api_list(sponsors)}

    def fetch_sponsor_by_name(self, sponsor_name: str) -> dict[str, Any]:
        self.sprint(f"Fetching sponsor '{sponsor_name}'")
        sponsor = self.__di.sponsor_service.find_sponsor_by_name(sponsor_name)
        if not sponsor:
            raise NotFoundError(f"Sponsor not found with name: {sponsor_name}", SPONSOR_NOT_FOUND)
        return {
            "message": f"Sponsor found with name: {sponsor_name}",
            "sponsor": domain_to_api(sponsor).model_dump(),
        }

    def fetch_sponsors_by_coop_duration(self, coop_duration: str) -> dict[str, Any]:
        self.sprint(f"Fetching sponsors with coop duration '{coop_duration}'")
        sponsors = self.__di.sponsor_service.find_sponsors_by_coop_duration(coop_duration)
        if not sponsors:
            raise NotFoundError(f"Sponsors not found with coop duration: {coop_duration}", SPONSORS_NOT_FOUND)
        return {
            "message": f"Sponsors found with coop duration: {coop_duration}",
            "sponsors": self.__to_api_list(sponsors),
        }

    def fetch_sponsors_by_class(self, sponsor_class: str) -> dict[str, Any]:
        self.sprint(f"Fetching sponsors with class '{sponsor_class}'")
        sponsors = self.__di.sponsor_service.find_sponsors_by_class(sponsor_class)
        if not sponsors:
            raise NotFoundError(f"Sponsors not found with sponsor class: {sponsor_class}", SPONSORS_NOT_FOUND)
        return {
            "message": f"Sponsors found with sponsor class: {sponsor_class}",
            "sponsors": self.__to_api_list(sponsors),
        }

    def update_sponsor(self, sponsor_name: str, payload: SponsorUpdatePayload) -> dict[str, Any]:
        self.sprint(f"Updating sponsor '{sponsor_name}'")
        updated = self.__di.sponsor_service.update_sponsor(
            name = sponsor_name,
            coop_duration = payload.coop_duration,
            image_url = payload.sponsor_image_url,
            website_url = payload.sponsor_website_url,
            sponsor_class = payload.sponsor_class,
        )
        if not updated:
            self.sprint("  Nothing was modified, values were already set")
        sponsor = self.__di.sponsor_service.find_sponsor_by_name(sponsor_name)
        if not sponsor:
            # deleted by someone else between the update and the read
            raise NotFoundError(f"Sponsor not found with name: {sponsor_name}", SPONSOR_NOT_FOUND)
        return {
            "message": f"Sponsor updated with name: {sponsor_name}",
            "sponsor": domain_to_api(sponsor).model_dump(),
        }

    def delete_sponsor(self, sponsor_name: str) -> dict[str, Any]:
        self.sprint(f"Deleting sponsor '{sponsor_name}'")
        if not self.__di.sponsor_service.delete_sponsor_by_name(sponsor_name):
            raise NotFoundError(f"Sponsor not found with name: {sponsor_name}", SPONSOR_NOT_FOUND)
        return {"message": f"Sponsor deleted with name: {sponsor_name}"}

    @staticmethod
    def __to_api_list(sponsors: list[Sponsor]) -> list[dict[str, Any]]:
        return [domain_to_api(sponsor).model_dump() for sponsor in sponsors]

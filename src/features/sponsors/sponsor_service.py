from enum import Enum
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from db.model.sponsor import SponsorDB
from db.schema.sponsor import Sponsor, SponsorSave, SponsorUpdate
from di.di import DI
from features.sponsors.sponsor_field_change import FieldChange
from util import log
from util.error_codes import (
    INVALID_ENUM_VALUE,
    MISSING_FIELD,
    NOTHING_TO_CHANGE,
    SPONSOR_ALREADY_EXISTS,
    SPONSOR_NOT_FOUND,
    SPONSOR_SAVE_FAILED,
    URL_FORMAT_ERROR,
    URL_UNREACHABLE,
)
from util.errors import ConflictError, ExternalServiceError, InternalError, NotFoundError, ValidationError

E = TypeVar("E", bound = Enum)

SPONSOR_NAME = "Sponsor name"
COOP_DURATION = "Coop duration"
IMAGE_URL = "Sponsor image url"
WEBSITE_URL = "Sponsor website url"
SPONSOR_CLASS = "Sponsor class"


def require_value(value: str | None, label: str) -> str:
    if not value:
        raise ValidationError(f"{label} cannot be null or empty", MISSING_FIELD)
    return value


def parse_enum(enum_type: type[E], value: str | None, label: str) -> E:
    """Parses the exact (case-sensitive) member value, or fails with a validation error."""
    member = enum_type.lookup(value)  # type: ignore[attr-defined]
    if member is None:
        raise ValidationError(f"{label} is not valid", INVALID_ENUM_VALUE)
    return member


class SponsorService:
    """
    Validates and normalizes sponsor data before it reaches the database.

    Every write is preceded by the full set of checks (presence, uniqueness, URL reachability,
    enum membership), so a failing request never leaves a partial change behind.
    """

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    def create_sponsor(
        self,
        name: str | None,
        coop_duration: str | None,
        image_url: str | None,
        website_url: str | None,
        sponsor_class: str | None,
    ) -> Sponsor:
        log.d(f"Creating sponsor '{name}'")

        # presence check
        name = require_value(name, SPONSOR_NAME)
        coop_duration = require_value(coop_duration, COOP_DURATION)
        image_url = require_value(image_url, IMAGE_URL)
        website_url = require_value(website_url, WEBSITE_URL)
        sponsor_class = require_value(sponsor_class, SPONSOR_CLASS)

        # duplicate check
        if self.__di.sponsor_crud.get(name):
            raise ConflictError("Sponsor name already exists", SPONSOR_ALREADY_EXISTS)

        # availability check, replaces the URLs with their normalized versions
        image_url = self.__verify_url(image_url, IMAGE_URL)
        website_url = self.__verify_url(website_url, WEBSITE_URL)

        # enum membership check
        coop_duration_enum = parse_enum(SponsorDB.CoopDuration, coop_duration, COOP_DURATION)
        sponsor_class_enum = parse_enum(SponsorDB.SponsorClass, sponsor_class, SPONSOR_CLASS)

        sponsor_save = SponsorSave(
            name = name,
            coop_duration = coop_duration_enum,
            image_url = image_url,
            website_url = website_url,
            sponsor_class = sponsor_class_enum,
        )
        try:
            sponsor_db = self.__di.sponsor_crud.create(sponsor_save)
        except IntegrityError as e:
            # another request created the same name in the meantime
            raise ConflictError("Sponsor name already exists", SPONSOR_ALREADY_EXISTS) from e
        except SQLAlchemyError as e:
            raise InternalError(f"Failed to save sponsor '{name}'", SPONSOR_SAVE_FAILED) from e
        sponsor = Sponsor.model_validate(sponsor_db)
        log.i(f"Sponsor '{sponsor.name}' created")
        return sponsor

    def find_sponsor_by_name(self, name: str | None) -> Sponsor | None:
        name = require_value(name, SPONSOR_NAME)
        sponsor_db = self.__di.sponsor_crud.get(name)
        if not sponsor_db:
            log.t(f"Sponsor '{name}' not found")
            return None
        return Sponsor.model_validate(sponsor_db)

    def find_all_sponsors(self) -> list[Sponsor]:
        return [Sponsor.model_validate(sponsor_db) for sponsor_db in self.__di.sponsor_crud.get_all()]

    def find_sponsors_by_class(self, sponsor_class: str | None) -> list[Sponsor]:
        sponsor_class_enum = parse_enum(SponsorDB.SponsorClass, sponsor_class, SPONSOR_CLASS)
        sponsors_db = self.__di.sponsor_crud.get_all_by_class(sponsor_class_enum)
        return [Sponsor.model_validate(sponsor_db) for sponsor_db in sponsors_db]

    def find_sponsors_by_coop_duration(self, coop_duration: str | None) -> list[Sponsor]:
        coop_duration_enum = parse_enum(SponsorDB.CoopDuration, coop_duration, COOP_DURATION)
        sponsors_db = self.__di.sponsor_crud.get_all_by_duration(coop_duration_enum)
        return [Sponsor.model_validate(sponsor_db) for sponsor_db in sponsors_db]

    def delete_sponsor_by_name(self, name: str | None) -> bool:
        if not name:
            return False
        deleted = self.__di.sponsor_crud.delete(name)
        if deleted:
            log.i(f"Sponsor '{name}' deleted")
        return deleted

    def update_sponsor(
        self,
        name: str | None,
        coop_duration: str | None = None,
        image_url: str | None = None,
        website_url: str | None = None,
        sponsor_class: str | None = None,
    ) -> bool:
        log.d(f"Updating sponsor '{name}'")

        # availability check
        name = require_value(name, SPONSOR_NAME)
        if not self.__di.sponsor_crud.get(name):
            raise NotFoundError("Sponsor does not exist", SPONSOR_NOT_FOUND)

        if not any([coop_duration, image_url, website_url, sponsor_class]):
            raise ValidationError("Nothing to be changed", NOTHING_TO_CHANGE)

        # enums first, so that invalid requests don't go out to the network
        coop_duration_change = FieldChange.resolve(
            coop_duration, lambda value: parse_enum(SponsorDB.CoopDuration, value, COOP_DURATION),
        )
        sponsor_class_change = FieldChange.resolve(
            sponsor_class, lambda value: parse_enum(SponsorDB.SponsorClass, value, SPONSOR_CLASS),
        )
        FieldChange.raise_first_invalid(coop_duration_change, sponsor_class_change)

        image_url_change = FieldChange.resolve(image_url, lambda value: self.__verify_url(value, IMAGE_URL))
        website_url_change = FieldChange.resolve(website_url, lambda value: self.__verify_url(value, WEBSITE_URL))
        FieldChange.raise_first_invalid(image_url_change, website_url_change)

        sponsor_update = SponsorUpdate(
            coop_duration = coop_duration_change.value_or_none(),
            image_url = image_url_change.value_or_none(),
            website_url = website_url_change.value_or_none(),
            sponsor_class = sponsor_class_change.value_or_none(),
        )
        log.t(f"  Applying partial update to '{name}'", sponsor_update)
        updated = self.__di.sponsor_crud.update(name, sponsor_update)
        if updated:
            log.i(f"Sponsor '{name}' updated")
        else:
            log.d(f"Sponsor '{name}' already had the requested values")
        return updated

    def __verify_url(self, url: str, label: str) -> str:
        try:
            probe_result = self.__di.url_reachability_checker.probe(url)
        except ExternalServiceError as e:
            raise ValidationError(f"{label} format error", URL_FORMAT_ERROR) from e
        if not probe_result.reachable:
            raise ValidationError(f"{label} connection failed", URL_UNREACHABLE)
        return probe_result.normalized_url

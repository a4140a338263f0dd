from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

if TYPE_CHECKING:
    from api.sponsors_controller import SponsorsController
    from db.crud.sponsor import SponsorCRUD
    from features.sponsors.sponsor_service import SponsorService
    from features.web_browsing.url_reachability_checker import UrlReachabilityChecker


class ConstructorDependencyNotMetError(Exception):
    pass


class DI:

    # Dynamic dependencies
    _db: Session | None
    # Repositories
    _sponsor_crud: "SponsorCRUD | None"
    # Services
    _sponsor_service: "SponsorService | None"
    # Controllers
    _sponsors_controller: "SponsorsController | None"
    # Internal tools
    _url_reachability_checker: "UrlReachabilityChecker | None"

    def __init__(
        self,
        db: Session | None = None,
        url_reachability_checker: "UrlReachabilityChecker | None" = None,
    ):
        # Dynamic dependencies
        self._db = db
        # Repositories
        self._sponsor_crud = None
        # Services
        self._sponsor_service = None
        # Controllers
        self._sponsors_controller = None
        # Internal tools
        self._url_reachability_checker = url_reachability_checker

    # === Dynamic dependencies ===

    @property
    def db(self) -> Session:
        if self._db is None:
            raise ConstructorDependencyNotMetError("Database session not provided")
        return self._db

    # === Repositories ===

    @property
    def sponsor_crud(self) -> "SponsorCRUD":
        if self._sponsor_crud is None:
            from db.crud.sponsor import SponsorCRUD
            self._sponsor_crud = SponsorCRUD(self.db)
        return self._sponsor_crud

    # === Services ===

    @property
    def sponsor_service(self) -> "SponsorService":
        if self._sponsor_service is None:
            from features.sponsors.sponsor_service import SponsorService
            self._sponsor_service = SponsorService(self)
        return self._sponsor_service

    # === Controllers ===

    @property
    def sponsors_controller(self) -> "SponsorsController":
        if self._sponsors_controller is None:
            from api.sponsors_controller import SponsorsController
            self._sponsors_controller = SponsorsController(self)
        return self._sponsors_controller

    # === Internal tools ===

    @property
    def url_reachability_checker(self) -> "UrlReachabilityChecker":
        if self._url_reachability_checker is None:
            from features.web_browsing.url_reachability_checker import UrlReachabilityChecker
            self._url_reachability_checker = UrlReachabilityChecker()
        return self._url_reachability_checker

from enum import Enum

from sqlalchemy import Column, DateTime, String
from sqlalchemy import Enum as EnumSQL
from sqlalchemy.sql import func

from db.model.base import BaseModel


class SponsorDB(BaseModel):
    __tablename__ = "sponsors"

    class CoopDuration(Enum):
        QUARTER_YEAR = "QUARTER_YEAR"
        FULL_YEAR = "FULL_YEAR"

        @classmethod
        def lookup(cls, value) -> "SponsorDB.CoopDuration | None":
            try:
                return cls(value)
            except ValueError:
                return None

    class SponsorClass(Enum):
        PLATINUM = "PLATINUM"
        GOLD = "GOLD"
        SILVER = "SILVER"

        @classmethod
        def lookup(cls, value) -> "SponsorDB.SponsorClass | None":
            try:
                return cls(value)
            except ValueError:
                return None

    name = Column(String, primary_key = True)  # natural key, never changes
    coop_duration = Column(EnumSQL(CoopDuration), nullable = False, index = True)
    image_url = Column(String, nullable = False)
    website_url = Column(String, nullable = False)
    sponsor_class = Column(EnumSQL(SponsorClass), nullable = False, index = True)
    created_at = Column(DateTime, server_default = func.now(), nullable = False)
    updated_at = Column(DateTime, server_default = func.now(), onupdate = func.now(), nullable = False)

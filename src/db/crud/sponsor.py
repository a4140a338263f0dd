from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.model.sponsor import SponsorDB
from db.schema.sponsor import SponsorSave, SponsorUpdate


class SponsorCRUD:

    _db: Session

    def __init__(self, db: Session):
        self._db = db

    def get(self, name: str) -> SponsorDB | None:
        return self._db.query(SponsorDB).filter(
            SponsorDB.name == name,
        ).first()

    def get_all(self) -> list[SponsorDB]:
        # noinspection PyTypeChecker
        return self._db.query(SponsorDB).order_by(SponsorDB.name).all()

    def get_all_by_class(self, sponsor_class: SponsorDB.SponsorClass) -> list[SponsorDB]:
        # noinspection PyTypeChecker
        return self._db.query(SponsorDB).filter(
            SponsorDB.sponsor_class == sponsor_class,
        ).order_by(SponsorDB.name).all()

    def get_all_by_duration(self, coop_duration: SponsorDB.CoopDuration) -> list[SponsorDB]:
        # noinspection PyTypeChecker
        return self._db.query(SponsorDB).filter(
            SponsorDB.coop_duration == coop_duration,
        ).order_by(SponsorDB.name).all()

    def create(self, create_data: SponsorSave) -> SponsorDB:
        sponsor = SponsorDB(**create_data.model_dump())
        self._db.add(sponsor)
        try:
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()  # keeps the session usable for the caller
            raise
        self._db.refresh(sponsor)
        return sponsor

    def update(self, name: str, update_data: SponsorUpdate) -> bool:
        """Applies only the fields set in update_data. Returns True if any stored value changed."""
        sponsor = self.get(name)
        if not sponsor:
            return False
        changed = False
        for key, value in update_data.model_dump(exclude_none = True).items():
            if getattr(sponsor, key) != value:
                setattr(sponsor, key, value)
                changed = True
        if changed:
            self._db.commit()
            self._db.refresh(sponsor)
        return changed

    def delete(self, name: str) -> bool:
        deleted_count = self._db.query(SponsorDB).filter(
            SponsorDB.name == name,
        ).delete(synchronize_session = False)
        self._db.commit()
        return deleted_count > 0

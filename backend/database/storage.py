import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from advisor.components.exception.exception import PersistenceError
from advisor.components.src_logging.logger import logging
from backend.database import models


class RecordNotFound(LookupError):
    def __init__(self, label: str, record_id: str):
        super().__init__(f"{label} not found")
        self.label = label
        self.record_id = record_id


class RecordStore:
    """
    CRUD access to one entity collection.

    Each call is its own unit of work: it commits (or rolls back) before
    returning, so handlers never share a transaction across operations.
    """

    def __init__(self, model, label: str, deletable: bool = False):
        self.model = model
        self.label = label
        self.deletable = deletable

    def _fail(self, db: Session, action: str, error: SQLAlchemyError):
        db.rollback()
        logging.error(f"{self.label} {action} failed: {error}")
        raise PersistenceError(error, sys) from error

    def find(self, db: Session, record_id: str):
        try:
            return db.get(self.model, record_id)
        except SQLAlchemyError as e:
            self._fail(db, "lookup", e)

    def get(self, db: Session, record_id: str):
        record = self.find(db, record_id)
        if record is None:
            raise RecordNotFound(self.label, record_id)
        return record

    def list_by_owner(self, db: Session, user_id: str):
        try:
            return (
                db.query(self.model)
                .filter(self.model.user_id == user_id)
                .order_by(
                    self.model.updated_at.desc(),
                    self.model.created_at.desc(),
                    self.model.id.desc(),
                )
                .all()
            )
        except SQLAlchemyError as e:
            self._fail(db, "listing", e)

    def create(self, db: Session, **fields):
        record = self.model(**fields)
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
        except SQLAlchemyError as e:
            self._fail(db, "create", e)
        logging.info(f"{self.label} {record.id} created")
        return record

    def update(self, db: Session, record_id: str, **changes):
        record = self.get(db, record_id)
        for field, value in changes.items():
            setattr(record, field, value)
        record.updated_at = models.utcnow()
        try:
            db.commit()
            db.refresh(record)
        except SQLAlchemyError as e:
            self._fail(db, "update", e)
        return record

    def delete(self, db: Session, record_id: str):
        if not self.deletable:
            raise TypeError(f"{self.label} records cannot be deleted")
        record = self.get(db, record_id)
        try:
            db.delete(record)
            db.commit()
        except SQLAlchemyError as e:
            self._fail(db, "delete", e)
        logging.info(f"{self.label} {record_id} deleted")


class UserStore(RecordStore):
    def __init__(self):
        super().__init__(models.User, "User")

    def get_by_username(self, db: Session, username: str):
        try:
            return db.query(models.User).filter(models.User.username == username).first()
        except SQLAlchemyError as e:
            self._fail(db, "lookup", e)

    def get_by_email(self, db: Session, email: str):
        try:
            return db.query(models.User).filter(models.User.email == email).first()
        except SQLAlchemyError as e:
            self._fail(db, "lookup", e)

    def list_by_owner(self, db: Session, user_id: str):
        raise TypeError("Users are not owned records")


class Storage:
    def __init__(self):
        self.users = UserStore()
        self.assessments = RecordStore(models.Assessment, "Assessment")
        self.resumes = RecordStore(models.Resume, "Resume", deletable=True)
        self.interviews = RecordStore(models.Interview, "Interview")
        self.career_paths = RecordStore(models.CareerPath, "Career path")
        self.skills = RecordStore(models.Skill, "Skill", deletable=True)
        self.goals = RecordStore(models.Goal, "Goal", deletable=True)
        self.recommendations = RecordStore(models.Recommendation, "Recommendation")


storage = Storage()

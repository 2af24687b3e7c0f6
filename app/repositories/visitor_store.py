"""
Visitor Store
Storage capability the visitor services depend on, plus its SQLAlchemy implementation.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateCredentialError
from app.models.visitor import Visitor

logger = logging.getLogger(__name__)

# Columns that may be used for exact and substring lookups
LOOKUP_FIELDS = ("qr_token", "otp", "name", "phone")

# Range of the 32-bit INTEGER primary key
MIN_VISITOR_ID = 1
MAX_VISITOR_ID = 2**31 - 1


class VisitorStore(ABC):
    """
    Get/put/find operations over visitor records.

    Implementations return records in ascending id order wherever more than
    one record is returned.
    """

    @abstractmethod
    def get(self, visitor_id: int) -> Optional[Visitor]:
        ...

    @abstractmethod
    def find_by_field(self, field: str, value: str) -> Optional[Visitor]:
        """Return the visitor whose ``field`` equals ``value`` exactly."""

    @abstractmethod
    def find_by_substring(self, field: str, text: str) -> List[Visitor]:
        """Return visitors whose ``field`` contains ``text``, ignoring case."""

    @abstractmethod
    def insert(self, visitor: Visitor) -> Visitor:
        """Persist a new visitor and assign its id."""

    @abstractmethod
    def update(self, visitor: Visitor) -> Visitor:
        ...

    @abstractmethod
    def list_all(self) -> List[Visitor]:
        ...


def _column(field: str):
    if field not in LOOKUP_FIELDS:
        raise ValueError(f"Unsupported visitor lookup field: {field}")
    return getattr(Visitor, field)


class SqlAlchemyVisitorStore(VisitorStore):
    """VisitorStore backed by a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, visitor_id: int) -> Optional[Visitor]:
        # Ids outside the INTEGER column range cannot exist; drivers raise on them
        if not MIN_VISITOR_ID <= visitor_id <= MAX_VISITOR_ID:
            return None
        return self.db.get(Visitor, visitor_id)

    def find_by_field(self, field: str, value: str) -> Optional[Visitor]:
        return self.db.query(Visitor).filter(_column(field) == value).order_by(Visitor.id).first()

    def find_by_substring(self, field: str, text: str) -> List[Visitor]:
        return (
            self.db.query(Visitor)
            .filter(_column(field).icontains(text, autoescape=True))
            .order_by(Visitor.id)
            .all()
        )

    def insert(self, visitor: Visitor) -> Visitor:
        self.db.add(visitor)
        self._commit()
        self.db.refresh(visitor)
        return visitor

    def update(self, visitor: Visitor) -> Visitor:
        self._commit()
        self.db.refresh(visitor)
        return visitor

    def list_all(self) -> List[Visitor]:
        return self.db.query(Visitor).order_by(Visitor.id).all()

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            message = str(e.orig).lower()
            field = "otp" if "otp" in message else "qr_token"
            logger.warning(f"[Store] Unique constraint rejected visitor write on {field}: {e.orig}")
            raise DuplicateCredentialError(field) from e

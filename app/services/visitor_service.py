"""
Visitor Directory Service
Resident-facing creation and listing of visitor records.
"""
from typing import Callable, List, Optional
import logging
import secrets
import uuid

from app.core.config import settings
from app.core.exceptions import DuplicateCredentialError
from app.models.visitor import Visitor
from app.repositories.visitor_store import VisitorStore
from app.schemas.visitor import VisitorCreate

logger = logging.getLogger(__name__)


def generate_qr_token() -> str:
    """Issue an opaque QR token, e.g. VIS-3F9A0C12B7DE."""
    return f"VIS-{uuid.uuid4().hex[:12].upper()}"


def generate_otp(length: Optional[int] = None) -> str:
    """Issue a numeric OTP of ``length`` digits without a leading zero."""
    length = length or settings.otp_length
    lower = 10 ** (length - 1)
    return str(lower + secrets.randbelow(9 * lower))


class VisitorDirectoryService:
    """Creates and lists visitors through an injected VisitorStore."""

    def __init__(self, store: VisitorStore):
        self.store = store

    def add_visitor(self, visitor_data: VisitorCreate) -> Visitor:
        """
        Persist a new visitor with arrived=False.

        Caller-supplied QR token and OTP are kept as given but must not be held
        by another visitor. Missing or blank credentials are generated.

        Raises:
            DuplicateCredentialError: If a supplied credential is taken, or no
                unused credential could be generated.
        """
        qr_token = self._resolve_credential("qr_token", visitor_data.qr_token, generate_qr_token)
        otp = self._resolve_credential("otp", visitor_data.otp, generate_otp)

        new_visitor = Visitor(
            name=visitor_data.name,
            phone=visitor_data.phone,
            qr_token=qr_token,
            otp=otp,
            arrived=False,
        )
        new_visitor = self.store.insert(new_visitor)
        logger.info(f"[Resident] Added visitor {new_visitor.id} ('{new_visitor.name}')")
        return new_visitor

    def list_visitors(self) -> List[Visitor]:
        return self.store.list_all()

    def _resolve_credential(self, field: str, supplied: Optional[str], generator: Callable[[], str]) -> str:
        if supplied is not None and supplied.strip():
            if self.store.find_by_field(field, supplied) is not None:
                logger.warning(f"[Resident] Rejected duplicate {field}: {supplied}")
                raise DuplicateCredentialError(field, supplied)
            return supplied

        for _ in range(settings.credential_max_attempts):
            candidate = generator()
            if self.store.find_by_field(field, candidate) is None:
                return candidate

        logger.error(f"[Resident] No unused {field} after {settings.credential_max_attempts} attempts")
        raise DuplicateCredentialError(field)

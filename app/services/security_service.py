"""
Security Lookup Service
Gate-side lookups and arrival confirmation.

Every lookup returns None when nothing matches; callers decide how to report it.
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from app.models.visitor import Visitor
from app.repositories.visitor_store import VisitorStore

logger = logging.getLogger(__name__)


class SecurityLookupService:
    def __init__(self, store: VisitorStore):
        self.store = store

    def find_by_token(self, token: str) -> Optional[Visitor]:
        """Exact, case-sensitive match on the QR token."""
        return self.store.find_by_field("qr_token", token)

    def find_by_otp(self, otp: str) -> Optional[Visitor]:
        """Exact match on the OTP."""
        return self.store.find_by_field("otp", otp)

    def confirm_arrival(self, visitor_id: int) -> Optional[Visitor]:
        """
        Mark a visitor as arrived.

        Repeated confirmations succeed and keep the original arrival time.

        Args:
            visitor_id: ID of the visitor

        Returns:
            The updated visitor, or None if no visitor has that ID
        """
        visitor = self.store.get(visitor_id)
        if visitor is None:
            return None

        if not visitor.arrived:
            visitor.arrived = True
            visitor.arrived_at = datetime.now(timezone.utc)
            logger.info(f"[Security] Visitor {visitor_id} marked as arrived")
        else:
            logger.info(f"[Security] Visitor {visitor_id} already marked as arrived")

        return self.store.update(visitor)

    def search_by_name(self, query: str) -> Optional[Visitor]:
        """
        Case-insensitive substring search on visitor name.

        Returns the match with the lowest ID when several visitors match.
        """
        matches = self.store.find_by_substring("name", query)
        if not matches:
            return None
        if len(matches) > 1:
            logger.info(f"[Security] Name search '{query}' matched {len(matches)} visitors, returning ID {matches[0].id}")
        return matches[0]

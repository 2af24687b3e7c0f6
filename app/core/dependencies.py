"""
FastAPI dependencies that wire the visitor services to a store.
Tests override get_visitor_store to swap the storage backend.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.repositories.visitor_store import VisitorStore, SqlAlchemyVisitorStore
from app.services.security_service import SecurityLookupService
from app.services.visitor_service import VisitorDirectoryService


def get_visitor_store(db: Session = Depends(get_db)) -> VisitorStore:
    return SqlAlchemyVisitorStore(db)


def get_directory_service(store: VisitorStore = Depends(get_visitor_store)) -> VisitorDirectoryService:
    return VisitorDirectoryService(store)


def get_security_service(store: VisitorStore = Depends(get_visitor_store)) -> SecurityLookupService:
    return SecurityLookupService(store)

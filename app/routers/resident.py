"""
Resident Router
Visitor registration and listing for residents
"""
from typing import List
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
import logging

from app.core.config import settings
from app.core.dependencies import get_directory_service
from app.core.exceptions import DuplicateCredentialError
from app.schemas.visitor import VisitorCreate, VisitorResponse
from app.services.sms_service import sms_service
from app.services.visitor_service import VisitorDirectoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resident", tags=["Resident"])


@router.post("/addVisitor", response_model=VisitorResponse, status_code=status.HTTP_200_OK)
def add_visitor(
    visitor_data: VisitorCreate,
    background_tasks: BackgroundTasks,
    service: VisitorDirectoryService = Depends(get_directory_service)
):
    """
    Register a new visitor.

    QR token and OTP are taken from the payload when present and generated
    otherwise. The new visitor starts as not arrived.

    Args:
        visitor_data: Visitor details and optional credentials
        background_tasks: Used to send the visitor pass by SMS
        service: Visitor directory service

    Returns:
        Created visitor including its ID and credentials

    Raises:
        HTTPException: 409 if the QR token or OTP is already in use
    """
    try:
        visitor = service.add_visitor(visitor_data)
    except DuplicateCredentialError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )

    if settings.send_visitor_pass_sms and sms_service.enabled and visitor.phone:
        background_tasks.add_task(
            sms_service.send_visitor_pass,
            visitor.phone,
            visitor.name,
            visitor.otp,
            visitor.qr_token,
            visitor.id,
        )

    return VisitorResponse.model_validate(visitor)


@router.get("/viewVisitors", response_model=List[VisitorResponse], status_code=status.HTTP_200_OK)
def view_visitors(service: VisitorDirectoryService = Depends(get_directory_service)):
    """List all visitors in ID order."""
    visitors = service.list_visitors()
    return [VisitorResponse.model_validate(visitor) for visitor in visitors]

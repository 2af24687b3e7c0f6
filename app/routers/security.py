"""
Security Router
Gate check-in endpoints: QR scan, OTP validation, name search and arrival confirmation
"""
from typing import Optional
from fastapi import APIRouter, Depends, Form, HTTPException, Query, status
import logging

from app.core.dependencies import get_security_service
from app.schemas.visitor import VisitorResponse, ArrivalConfirmationResponse
from app.services.security_service import SecurityLookupService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/security", tags=["Security"])


@router.get("/scan/{token}", response_model=VisitorResponse, status_code=status.HTTP_200_OK)
def scan_visitor(
    token: str,
    service: SecurityLookupService = Depends(get_security_service)
):
    """
    Get visitor details by QR token.
    Used when scanning the visitor pass at the gate.

    Raises:
        HTTPException: If no visitor holds the token
    """
    logger.info(f"[Security] Looking up visitor with QR token: {token}")
    visitor = service.find_by_token(token)

    if not visitor:
        logger.warning(f"[Security] QR token not found: {token}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Visitor with QR token '{token}' not found"
        )

    return VisitorResponse.model_validate(visitor)


@router.post("/validateOtp", response_model=VisitorResponse, status_code=status.HTTP_200_OK)
def validate_otp(
    otp: Optional[str] = Query(None, description="OTP from the visitor pass"),
    otp_form: Optional[str] = Form(None, alias="otp", description="OTP from the visitor pass"),
    service: SecurityLookupService = Depends(get_security_service)
):
    """
    Get visitor details by OTP. Accepts the OTP as a form field or query parameter.

    Raises:
        HTTPException: 422 if no OTP was sent, 404 if no visitor holds it
    """
    code = otp_form if otp_form is not None else otp
    if code is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Parameter 'otp' is required"
        )

    visitor = service.find_by_otp(code)

    if not visitor:
        logger.warning("[Security] OTP validation failed: no matching visitor")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No visitor found for the given OTP"
        )

    logger.info(f"[Security] OTP validated for visitor {visitor.id}")
    return VisitorResponse.model_validate(visitor)


@router.put("/markArrived/{visitor_id}", response_model=ArrivalConfirmationResponse, status_code=status.HTTP_200_OK)
def mark_arrived(
    visitor_id: int,
    service: SecurityLookupService = Depends(get_security_service)
):
    """
    Mark a visitor as arrived. Calling it again for the same visitor also succeeds.

    Args:
        visitor_id: ID of the visitor
        service: Security lookup service

    Returns:
        Confirmation message with the updated visitor

    Raises:
        HTTPException: If visitor not found
    """
    visitor = service.confirm_arrival(visitor_id)

    if not visitor:
        logger.warning(f"[Security] Cannot mark arrival, visitor {visitor_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Visitor with ID {visitor_id} not found"
        )

    return ArrivalConfirmationResponse(
        message="Visitor marked as arrived",
        visitor=VisitorResponse.model_validate(visitor)
    )


@router.get("/search", response_model=VisitorResponse, status_code=status.HTTP_200_OK)
def search_visitor(
    name: str = Query(..., description="Part of the visitor's name, case-insensitive"),
    service: SecurityLookupService = Depends(get_security_service)
):
    """
    Find a visitor by name. When several visitors match, the one registered first is returned.

    Raises:
        HTTPException: If no visitor name contains the query
    """
    visitor = service.search_by_name(name)

    if not visitor:
        logger.warning(f"[Security] No visitor matches name '{name}'")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No visitor found matching name '{name}'"
        )

    return VisitorResponse.model_validate(visitor)

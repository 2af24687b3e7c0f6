from app.schemas.visitor import (
    VisitorCreate,
    VisitorResponse,
    ArrivalConfirmationResponse,
)

__all__ = [
    "VisitorCreate",
    "VisitorResponse",
    "ArrivalConfirmationResponse",
]

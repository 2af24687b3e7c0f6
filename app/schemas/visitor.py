from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class CamelModel(BaseModel):
    """Base schema that reads snake_case or camelCase and writes camelCase"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VisitorCreate(CamelModel):
    """Schema for a resident registering a visitor"""
    name: Optional[str] = Field(None, description="Name of the visitor")
    phone: Optional[str] = Field(None, description="Phone number of the visitor")
    qr_token: Optional[str] = Field(None, description="QR token; generated when omitted")
    otp: Optional[str] = Field(None, description="One-time passcode; generated when omitted")


class VisitorResponse(CamelModel):
    """Schema for visitor response"""
    id: int
    name: Optional[str] = None
    phone: Optional[str] = None
    qr_token: str
    otp: str
    arrived: bool
    created_at: Optional[datetime] = None
    arrived_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class ArrivalConfirmationResponse(BaseModel):
    """Schema for arrival confirmation response"""
    message: str
    visitor: VisitorResponse

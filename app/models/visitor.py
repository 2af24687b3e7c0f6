from sqlalchemy import Column, Integer, Text, Boolean, DateTime
from sqlalchemy.sql import func
from app.core.database import Base


class Visitor(Base):
    """
    Visitor model for resident-registered guests.
    Stores visitor details, check-in credentials and arrival state.
    """
    __tablename__ = "visitors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=True, index=True)
    phone = Column(Text, nullable=True)

    # Check-in credentials
    qr_token = Column(Text, unique=True, index=True, nullable=False)
    otp = Column(Text, unique=True, index=True, nullable=False)

    # Arrival state (false -> true only)
    arrived = Column(Boolean, default=False, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    arrived_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Visitor(id={self.id}, name='{self.name}', arrived={self.arrived})>"

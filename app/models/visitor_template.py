"""
VisitorTemplate model for the visitor_templates table.
Reserved for recurring visitors; no endpoint reads or writes it yet.
"""
from sqlalchemy import Column, Integer, String
from app.core.database import Base


class VisitorTemplate(Base):
    __tablename__ = "visitor_templates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    photo_path = Column(String(500), nullable=True)

    def __repr__(self):
        return f"<VisitorTemplate(id={self.id}, name='{self.name}')>"

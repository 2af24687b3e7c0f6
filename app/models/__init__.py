from app.models.visitor import Visitor
from app.models.visitor_template import VisitorTemplate

__all__ = ["Visitor", "VisitorTemplate"]

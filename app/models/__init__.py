from app.models.base import Base
from app.models.companies import Company

__all__ = ["Base", "Company"]

"""
Partner delivery category model
"""

from sqlalchemy import Column, Integer, String, Boolean, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from database import Base


class PartnerCategory(Base):
    """Delivery capacity a partner declares for a product category"""
    __tablename__ = "partner_categories"

    id = Column(Integer, primary_key=True, index=True)
    partner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    delivery_capacity = Column(Integer, nullable=False)
    success_rate = Column(Numeric(5, 2), nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    partner = relationship("User", back_populates="partner_categories")

    def __repr__(self):
        return f"<PartnerCategory(id={self.id}, partner_id={self.partner_id}, category='{self.category}')>"

"""
SQLAlchemy ORM Models.

Maps the Order entity to the ``orders`` table.
"""
from datetime import datetime, timezone

from sqlalchemy import BigInteger, Column, DateTime, Index, String
from sqlalchemy.orm import declarative_base


Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ORDER MODEL
# =============================================================================

class OrderModel(Base):
    """
    Order database model.
    
    Stores the fields checkout reads; status is the only column it writes.
    """
    
    __tablename__ = "orders"
    
    order_id = Column(String(255), primary_key=True)
    status = Column(String(50), nullable=False, default="pending", index=True)
    
    # Minor currency unit
    amount = Column(BigInteger, nullable=False)
    expire_at = Column(DateTime(timezone=True), nullable=False)
    card_token = Column(String(255), nullable=False, default="")
    
    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)
    
    __table_args__ = (
        Index('ix_orders_status_expire_at', 'status', 'expire_at'),
    )
    
    def __repr__(self):
        return f"<OrderModel(order_id={self.order_id}, status={self.status})>"

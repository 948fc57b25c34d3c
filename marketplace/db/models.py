"""
SQLAlchemy ORM Models
Database table definitions using SQLAlchemy ORM.
"""

from sqlalchemy import Column, Integer, Numeric, String, Text, TIMESTAMP, Index
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class User(Base):
    """
    User model.

    Stores login name, verbatim credential and role.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False,
                      comment='Credential compared verbatim at login')
    role = Column(String(20), nullable=False, server_default='USER',
                  comment='Role: ADMIN or USER')

    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"


class Product(Base):
    """
    Product model.

    Stores product catalog information.
    """
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=True, index=True)
    brand = Column(String(255), nullable=True, index=True)
    price = Column(Numeric(12, 2), nullable=False, index=True)
    stock = Column(Integer, nullable=False, server_default='0')

    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_products_name_id', 'name', 'id'),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name[:30] if self.name else None})>"


class AuditLog(Base):
    """
    Audit log model.

    Append-only; the autoincrement id gives the order of occurrence.
    """
    __tablename__ = 'audit_log'

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_log = Column(Text, nullable=False,
                       comment='Rendered audit line')

    def __repr__(self):
        return f"<AuditLog(id={self.id})>"

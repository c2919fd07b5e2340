"""
PostgreSQL Database Models - SQLAlchemy ORM
All tables for the Procurement Management System

Timestamps are stored as BigInteger nanoseconds since the Unix epoch.
"""
from typing import Optional
from sqlalchemy import BigInteger, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
import uuid as uuid_lib

from .connection import Base


# ==================== VENDOR MODEL ====================

class Vendor(Base):
    """Vendor table - registered supplier companies"""
    __tablename__ = "vendors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid_lib.uuid4()))
    company_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), default="active", index=True)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)


# ==================== QUOTATION MODELS ====================

class QuotationRequest(Base):
    """Quotation request - a need for a quantity of an item by a date"""
    __tablename__ = "quotation_requests"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid_lib.uuid4()))
    description: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[int] = mapped_column(BigInteger, nullable=False)
    unit_of_measurement: Mapped[str] = mapped_column(String(50), nullable=False)
    required_delivery_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    request_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="pending", index=True)

    __table_args__ = (
        Index('idx_quotation_requests_status_date', 'status', 'request_date'),
    )


class Quotation(Base):
    """Quotation - a vendor's response to a quotation request"""
    __tablename__ = "quotations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid_lib.uuid4()))
    # Weak references: no foreign keys, dangling ids are allowed
    request_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    vendor_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, nullable=False)
    delivery_timeline: Mapped[str] = mapped_column(Text, nullable=False)
    terms_and_conditions: Mapped[str] = mapped_column(Text, nullable=False)
    validity_period: Mapped[int] = mapped_column(BigInteger, nullable=False)
    submission_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="submitted", index=True)


# ==================== PURCHASE REQUISITION MODELS ====================

class PurchaseRequisition(Base):
    """Purchase requisition - main requisition table"""
    __tablename__ = "purchase_requisitions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid_lib.uuid4()))
    requested_by: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    total_estimated_cost: Mapped[float] = mapped_column(Float, default=0)
    justification: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(50), default="draft", index=True)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index('idx_requisitions_status_created_at', 'status', 'created_at'),
    )


class PurchaseRequisitionItem(Base):
    """Purchase requisition items - line items owned by a requisition"""
    __tablename__ = "purchase_requisition_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid_lib.uuid4()))
    requisition_id: Mapped[str] = mapped_column(String(36), ForeignKey("purchase_requisitions.id", ondelete="CASCADE"), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[int] = mapped_column(BigInteger, nullable=False)
    estimated_cost: Mapped[float] = mapped_column(Float, nullable=False)
    item_index: Mapped[int] = mapped_column(Integer, default=0)  # Order in the requisition


class ApprovalRecord(Base):
    """Approval history - append-only, rows are never updated"""
    __tablename__ = "approval_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid_lib.uuid4()))
    requisition_id: Mapped[str] = mapped_column(String(36), ForeignKey("purchase_requisitions.id", ondelete="CASCADE"), nullable=False, index=True)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    action: Mapped[str] = mapped_column(String(20), nullable=False)
    approver_name: Mapped[str] = mapped_column(String(255), nullable=False)
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index('idx_approval_records_requisition_seq', 'requisition_id', 'sequence', unique=True),
    )

"""
Shared FastAPI dependencies - repositories bound to the request session
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.quotations.infrastructure.sqlalchemy_repository import SqlAlchemyQuotationRepository
from app.requisitions.infrastructure.sqlalchemy_repository import (
    SqlAlchemyPurchaseRequisitionRepository,
)
from app.vendors.infrastructure.sqlalchemy_repository import SqlAlchemyVendorRepository
from database import get_postgres_session


async def get_requisition_repository(
    session: AsyncSession = Depends(get_postgres_session),
) -> SqlAlchemyPurchaseRequisitionRepository:
    return SqlAlchemyPurchaseRequisitionRepository(session)


async def get_vendor_repository(
    session: AsyncSession = Depends(get_postgres_session),
) -> SqlAlchemyVendorRepository:
    return SqlAlchemyVendorRepository(session)


async def get_quotation_repository(
    session: AsyncSession = Depends(get_postgres_session),
) -> SqlAlchemyQuotationRepository:
    return SqlAlchemyQuotationRepository(session)

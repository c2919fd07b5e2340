from typing import Optional, Sequence

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.vendors.application.ports import VendorRepository
from app.vendors.domain.models import Vendor, VendorStatus
from database import Vendor as VendorModel


def _to_domain(row: VendorModel) -> Vendor:
    return Vendor(
        id=row.id,
        company_name=row.company_name,
        contact_person=row.contact_person,
        email=row.email,
        phone_number=row.phone_number,
        address=row.address,
        category=row.category,
        status=VendorStatus(row.status),
        created_at=row.created_at,
    )


class SqlAlchemyVendorRepository(VendorRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, vendor_id: str) -> Optional[Vendor]:
        result = await self._session.execute(
            select(VendorModel).where(VendorModel.id == vendor_id)
        )
        row = result.scalar_one_or_none()
        return _to_domain(row) if row is not None else None

    async def get_for_update(self, vendor_id: str) -> Optional[Vendor]:
        result = await self._session.execute(
            select(VendorModel).where(VendorModel.id == vendor_id).with_for_update()
        )
        row = result.scalar_one_or_none()
        return _to_domain(row) if row is not None else None

    async def add(self, vendor: Vendor) -> None:
        self._session.add(
            VendorModel(
                id=vendor.id,
                company_name=vendor.company_name,
                contact_person=vendor.contact_person,
                email=vendor.email,
                phone_number=vendor.phone_number,
                address=vendor.address,
                category=vendor.category,
                status=vendor.status.value,
                created_at=vendor.created_at,
            )
        )

    async def update(self, vendor: Vendor) -> None:
        await self._session.execute(
            update(VendorModel)
            .where(VendorModel.id == vendor.id)
            .values(
                company_name=vendor.company_name,
                contact_person=vendor.contact_person,
                email=vendor.email,
                phone_number=vendor.phone_number,
                address=vendor.address,
                category=vendor.category,
                status=vendor.status.value,
            )
        )

    async def delete(self, vendor_id: str) -> None:
        await self._session.execute(delete(VendorModel).where(VendorModel.id == vendor_id))

    async def list(self) -> Sequence[Vendor]:
        result = await self._session.execute(
            select(VendorModel).order_by(desc(VendorModel.created_at), VendorModel.id)
        )
        return [_to_domain(row) for row in result.scalars().all()]

    async def commit(self) -> None:
        await self._session.commit()

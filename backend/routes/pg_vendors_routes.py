"""
PostgreSQL Vendor Routes - Vendor Registry
"""
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel, EmailStr
import uuid

from app.common.clock import now_ns
from app.common.errors import DomainError
from app.vendors.application.ports import VendorRepository
from app.vendors.application.use_cases import (
    CreateVendorUseCase,
    DeleteVendorUseCase,
    GetVendorUseCase,
    ListVendorsUseCase,
    SetVendorStatusUseCase,
    UpdateVendorCommand,
    UpdateVendorUseCase,
    VendorDetails,
)
from app.vendors.domain.models import VendorStatus
from app.vendors.presentation.response_mapper import vendor_to_response
from routes.dependencies import get_vendor_repository
from routes.errors import to_http_exception

# Create router
pg_vendors_router = APIRouter(prefix="/api/pg", tags=["PostgreSQL Vendors"])


# ==================== PYDANTIC MODELS ====================

class VendorCreate(BaseModel):
    company_name: str
    contact_person: str
    email: EmailStr
    phone_number: str
    address: str
    category: str

    def to_details(self) -> VendorDetails:
        return VendorDetails(
            company_name=self.company_name,
            contact_person=self.contact_person,
            email=str(self.email),
            phone_number=self.phone_number,
            address=self.address,
            category=self.category,
        )


class VendorUpdate(VendorCreate):
    status: VendorStatus


class VendorStatusUpdate(BaseModel):
    status: VendorStatus


# ==================== VENDOR ROUTES ====================

@pg_vendors_router.post("/vendors")
async def create_vendor(
    data: VendorCreate,
    repository: VendorRepository = Depends(get_vendor_repository),
):
    """Register a new vendor"""
    use_case = CreateVendorUseCase(
        repository=repository,
        id_generator=lambda: str(uuid.uuid4()),
        clock=now_ns,
    )
    try:
        vendor = await use_case.execute(data.to_details())
    except DomainError as exc:
        raise to_http_exception(exc)

    return vendor_to_response(vendor)


@pg_vendors_router.get("/vendors")
async def get_vendors(
    repository: VendorRepository = Depends(get_vendor_repository),
):
    """Get all vendors"""
    vendors = await ListVendorsUseCase(repository).execute()
    return [vendor_to_response(v) for v in vendors]


@pg_vendors_router.get("/vendors/{vendor_id}")
async def get_vendor(
    vendor_id: str,
    repository: VendorRepository = Depends(get_vendor_repository),
):
    """Get a single vendor"""
    vendor = await GetVendorUseCase(repository).execute(vendor_id)
    if vendor is None:
        raise HTTPException(status_code=404, detail="Vendor not found")

    return vendor_to_response(vendor)


@pg_vendors_router.put("/vendors/{vendor_id}")
async def update_vendor(
    vendor_id: str,
    data: VendorUpdate,
    repository: VendorRepository = Depends(get_vendor_repository),
):
    """Replace every vendor field, status included"""
    command = UpdateVendorCommand(
        vendor_id=vendor_id,
        details=data.to_details(),
        status=data.status,
    )
    try:
        vendor = await UpdateVendorUseCase(repository).execute(command)
    except DomainError as exc:
        raise to_http_exception(exc)

    return vendor_to_response(vendor)


@pg_vendors_router.patch("/vendors/{vendor_id}/status")
async def set_vendor_status(
    vendor_id: str,
    data: VendorStatusUpdate,
    repository: VendorRepository = Depends(get_vendor_repository),
):
    """Activate or deactivate a vendor"""
    try:
        vendor = await SetVendorStatusUseCase(repository).execute(vendor_id, data.status)
    except DomainError as exc:
        raise to_http_exception(exc)

    return vendor_to_response(vendor)


@pg_vendors_router.delete("/vendors/{vendor_id}")
async def delete_vendor(
    vendor_id: str,
    repository: VendorRepository = Depends(get_vendor_repository),
):
    """Delete a vendor - existing quotations keep their vendor id"""
    try:
        await DeleteVendorUseCase(repository).execute(vendor_id)
    except DomainError as exc:
        raise to_http_exception(exc)

    return {"message": "Vendor deleted", "id": vendor_id}

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from app.common.clock import Clock, IdGenerator
from app.common.errors import NotFoundError, ValidationError
from app.common.validation import EMAIL_PATTERN, require_text
from app.vendors.application.ports import VendorRepository
from app.vendors.domain.models import Vendor, VendorStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VendorDetails:
    company_name: str
    contact_person: str
    email: str
    phone_number: str
    address: str
    category: str


@dataclass(frozen=True)
class UpdateVendorCommand:
    vendor_id: str
    details: VendorDetails
    status: VendorStatus


def _validate_details(details: VendorDetails) -> VendorDetails:
    email = require_text(details.email, "Email")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email address")

    return VendorDetails(
        company_name=require_text(details.company_name, "Company name"),
        contact_person=require_text(details.contact_person, "Contact person"),
        email=email,
        phone_number=require_text(details.phone_number, "Phone number"),
        address=require_text(details.address, "Address"),
        category=require_text(details.category, "Category"),
    )


def _validate_status(status: VendorStatus) -> VendorStatus:
    try:
        return VendorStatus(status)
    except ValueError:
        raise ValidationError(f"Unknown vendor status: {status}")


async def _load_for_update(repository: VendorRepository, vendor_id: str) -> Vendor:
    vendor = await repository.get_for_update(vendor_id)
    if vendor is None:
        raise NotFoundError(f"Vendor {vendor_id} not found")
    return vendor


class CreateVendorUseCase:
    def __init__(
        self,
        repository: VendorRepository,
        id_generator: IdGenerator,
        clock: Clock,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock

    async def execute(self, details: VendorDetails) -> Vendor:
        details = _validate_details(details)
        vendor = Vendor(
            id=self._id_generator(),
            status=VendorStatus.ACTIVE,
            created_at=self._clock(),
            **vars(details),
        )

        await self._repository.add(vendor)
        await self._repository.commit()

        logger.info(f"Registered vendor {vendor.id} ({vendor.company_name})")
        return vendor


class UpdateVendorUseCase:
    def __init__(self, repository: VendorRepository) -> None:
        self._repository = repository

    async def execute(self, command: UpdateVendorCommand) -> Vendor:
        details = _validate_details(command.details)
        status = _validate_status(command.status)

        vendor = await _load_for_update(self._repository, command.vendor_id)
        updated = replace(vendor, status=status, **vars(details))

        await self._repository.update(updated)
        await self._repository.commit()

        logger.info(f"Updated vendor {updated.id}")
        return updated


class SetVendorStatusUseCase:
    def __init__(self, repository: VendorRepository) -> None:
        self._repository = repository

    async def execute(self, vendor_id: str, status: VendorStatus) -> Vendor:
        status = _validate_status(status)

        vendor = await _load_for_update(self._repository, vendor_id)
        updated = replace(vendor, status=status)

        await self._repository.update(updated)
        await self._repository.commit()

        logger.info(f"Vendor {vendor_id} is now {status.value}")
        return updated


class DeleteVendorUseCase:
    def __init__(self, repository: VendorRepository) -> None:
        self._repository = repository

    async def execute(self, vendor_id: str) -> None:
        # Quotations keep their vendor id; dangling references are allowed
        await _load_for_update(self._repository, vendor_id)
        await self._repository.delete(vendor_id)
        await self._repository.commit()

        logger.info(f"Deleted vendor {vendor_id}")


class GetVendorUseCase:
    def __init__(self, repository: VendorRepository) -> None:
        self._repository = repository

    async def execute(self, vendor_id: str) -> Optional[Vendor]:
        return await self._repository.get(vendor_id)


class ListVendorsUseCase:
    def __init__(self, repository: VendorRepository) -> None:
        self._repository = repository

    async def execute(self) -> Sequence[Vendor]:
        return await self._repository.list()

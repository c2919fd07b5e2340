from typing import Optional, Protocol, Sequence

from app.vendors.domain.models import Vendor


class VendorRepository(Protocol):
    async def get(self, vendor_id: str) -> Optional[Vendor]:
        ...

    async def get_for_update(self, vendor_id: str) -> Optional[Vendor]:
        ...

    async def add(self, vendor: Vendor) -> None:
        ...

    async def update(self, vendor: Vendor) -> None:
        ...

    async def delete(self, vendor_id: str) -> None:
        ...

    async def list(self) -> Sequence[Vendor]:
        ...

    async def commit(self) -> None:
        ...

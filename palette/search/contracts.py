"""Data contracts shared by the navigation index, gateway and palette."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class SearchDomain(str, Enum):
    """Business entities returned by the remote search endpoint."""

    CUSTOMER = "customer"
    PRODUCT = "product"
    PHONE = "phone"
    SERVICE = "service"
    INVOICE = "invoice"
    REPAIR = "repair"
    INSTALLMENT = "installment"


class QuickAction(str, Enum):
    """Secondary actions offered next to a data row."""

    OPEN = "open"
    PAY_NEXT = "payNext"
    RECEIPT = "receipt"
    PRINT = "print"


class NavNode(BaseModel):
    """Node of the application's hierarchical menu definition."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., description="Persian menu label.")
    icon: str | None = None
    path: str | None = Field(None, description="Route path; absent for pure groups.")
    children: tuple["NavNode", ...] = ()


class NavEntry(BaseModel):
    """Navigable leaf of the flattened menu."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    path: str
    icon: str | None = None
    parent_title: str | None = None


class _RemoteResultBase(BaseModel):
    """Fields every remote search hit may carry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str | None = None
    subtitle: str | None = None
    title_hl: str | None = Field(None, alias="titleHL")
    snippet: str | None = None

    @property
    def key(self) -> str:
        """Stable identity of the hit across responses."""

        return f"{self.domain}:{self.id}"  # type: ignore[attr-defined]

    @property
    def label(self) -> str:
        return self.title or f"#{self.id}"


class CustomerResult(_RemoteResultBase):
    domain: Literal["customer"] = "customer"


class ProductResult(_RemoteResultBase):
    domain: Literal["product"] = "product"


class PhoneResult(_RemoteResultBase):
    domain: Literal["phone"] = "phone"


class ServiceResult(_RemoteResultBase):
    domain: Literal["service"] = "service"


class InvoiceResult(_RemoteResultBase):
    domain: Literal["invoice"] = "invoice"


class RepairResult(_RemoteResultBase):
    domain: Literal["repair"] = "repair"


class InstallmentResult(_RemoteResultBase):
    domain: Literal["installment"] = "installment"


RemoteResultItem = Annotated[
    Union[
        CustomerResult,
        ProductResult,
        PhoneResult,
        ServiceResult,
        InvoiceResult,
        RepairResult,
        InstallmentResult,
    ],
    Field(discriminator="domain"),
]

REMOTE_RESULT_ADAPTER: TypeAdapter[RemoteResultItem] = TypeAdapter(RemoteResultItem)


class RemoteResults(BaseModel):
    """Remote hits grouped by domain in the order the server returned them."""

    model_config = ConfigDict(frozen=True)

    term: str = ""
    groups: dict[str, tuple[RemoteResultItem, ...]] = Field(default_factory=dict)

    @property
    def items(self) -> list[RemoteResultItem]:
        """Flatten the domain buckets, keeping bucket and intra-bucket order."""

        return [item for bucket in self.groups.values() for item in bucket]

    @property
    def count(self) -> int:
        return sum(len(bucket) for bucket in self.groups.values())


class PaletteStatus(str, Enum):
    """Lifecycle of the command palette."""

    CLOSED = "closed"
    OPEN_EMPTY = "open_empty"
    OPEN_QUERY_LOCAL_ONLY = "open_query_local_only"
    OPEN_QUERY_MERGED = "open_query_merged"


__all__ = [
    "CustomerResult",
    "InstallmentResult",
    "InvoiceResult",
    "NavEntry",
    "NavNode",
    "PaletteStatus",
    "PhoneResult",
    "ProductResult",
    "QuickAction",
    "REMOTE_RESULT_ADAPTER",
    "RemoteResultItem",
    "RemoteResults",
    "RepairResult",
    "SearchDomain",
    "ServiceResult",
]

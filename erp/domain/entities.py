"""
Typed entity models.

Every stored record shares the ``BaseEntity`` shape; concrete types add their
own fields. Field names are snake_case in Python and camelCase on the wire
(``createdAt``, ``rateToIDR``...), which is also how they are persisted.
Unknown fields already present in stored data are kept as extras.
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# fields owned by the store; payloads cannot set them
RESERVED_FIELDS = ("id", "createdAt", "updatedAt")


class BaseEntity(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str
    code: str
    name: str
    active: bool = True
    created_at: str
    updated_at: str

    def to_record(self) -> dict[str, Any]:
        """
        Wire/persisted form of the entity.

        Optional fields nobody set are left out; a field explicitly set to
        ``None`` is kept as ``null``.
        """
        record = self.model_dump(by_alias=True, mode="json")
        unset = {self.wire_name(name) for name in type(self).model_fields if name not in self.model_fields_set}
        return {key: value for key, value in record.items() if value is not None or key not in unset}

    @classmethod
    def wire_name(cls, field: str) -> str:
        """Map a Python field name to its persisted key; unknown names pass through."""
        info = cls.model_fields.get(field)
        if info is not None and info.alias:
            return info.alias
        return field

    @classmethod
    def wire_fields(cls) -> list[str]:
        return [info.alias or name for name, info in cls.model_fields.items()]


# ---------------------------- master data ----------------------------
class Category(BaseEntity):
    description: Optional[str] = None


class Finishing(BaseEntity):
    description: Optional[str] = None


class MaterialType(BaseEntity):
    description: Optional[str] = None


class CustomerType(BaseEntity):
    description: Optional[str] = None


class Supplier(BaseEntity):
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    rating_avg: Optional[float] = None


class Customer(BaseEntity):
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    type_id: Optional[str] = None


class Currency(BaseEntity):
    symbol: str
    rate_to_idr: float = Field(alias="rateToIDR")


class Department(BaseEntity):
    head: Optional[str] = None


class Warehouse(BaseEntity):
    location: Optional[str] = None


class Vehicle(BaseEntity):
    plate_no: str
    capacity: Optional[float] = None


class Expedition(BaseEntity):
    contact: Optional[str] = None
    phone: Optional[str] = None


class Account(BaseEntity):
    number: str
    type: Literal["asset", "liability", "equity", "income", "expense"]
    parent_id: Optional[str] = None


class Size(BaseEntity):
    dimension: Optional[str] = None


class SupplierItem(BaseEntity):
    supplier_id: str
    product_id: Optional[str] = None
    supplier_sku: Optional[str] = None
    price: Optional[float] = None


class AccountCategory(BaseEntity):
    pass


class AccountSubCategory(BaseEntity):
    category_id: str


class Project(BaseEntity):
    customer_id: str
    pm: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Literal["open", "on-hold", "closed"] = "open"
    fee: Optional[float] = None


class Promotion(BaseEntity):
    discount_pct: Optional[float] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class Armada(BaseEntity):
    vehicle_id: str
    driver: Optional[str] = None
    default_expedition_id: Optional[str] = None


class Origin(BaseEntity):
    address: Optional[str] = None


class BankAccount(BaseEntity):
    bank_name: str
    account_no: str
    holder_name: str
    currency_code: str


class Vendor(BaseEntity):
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class Product(BaseEntity):
    sell_name: Optional[str] = None
    status: Optional[Literal["draft", "active", "archived"]] = None
    images: Optional[str] = None
    category_id: Optional[str] = None
    finishing_id: Optional[str] = None
    material_type_id: Optional[str] = None


# ---------------------------- documents ----------------------------
# Line items, deductions and attachments stay as extras; totals are computed
# by the document forms, not here.
class PurchaseRequest(BaseEntity):
    status: Literal["draft", "pending_approval", "approved", "rejected"] = "draft"
    urgency: Literal["low", "medium", "high", "urgent"] = "medium"
    requested_by: Optional[str] = None
    department: Optional[str] = None
    expected_date: Optional[str] = None
    selected_supplier_id: Optional[str] = None


class PurchaseOrder(BaseEntity):
    status: Literal["draft", "sent", "confirmed", "shipped", "received", "cancelled"] = "draft"
    purchase_request_id: Optional[str] = None
    supplier_id: Optional[str] = None
    order_date: Optional[str] = None
    expected_delivery_date: Optional[str] = None
    currency: Optional[str] = None
    total_amount: Optional[float] = None


class PurchaseInvoice(BaseEntity):
    status: Optional[str] = None
    purchase_order_id: Optional[str] = None
    supplier_id: Optional[str] = None
    invoice_date: Optional[str] = None
    due_date: Optional[str] = None
    total_amount: Optional[float] = None


class ReceiveItems(BaseEntity):
    status: Optional[str] = None
    purchase_order_id: Optional[str] = None
    warehouse_id: Optional[str] = None
    received_date: Optional[str] = None


class ComplaintRetur(BaseEntity):
    status: Optional[str] = None
    receive_items_id: Optional[str] = None
    supplier_id: Optional[str] = None
    priority: Literal["low", "medium", "high", "urgent"] = "medium"


class Sku(BaseEntity):
    product_id: Optional[str] = None
    warehouse_id: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None

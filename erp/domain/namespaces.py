"""Namespace keys and the entity type stored under each of them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Type

from . import entities as e

SEED_SENTINEL_KEY = "erp.master.seeded"


@dataclass(frozen=True)
class Namespace:
    slug: str
    key: str
    model: Type[e.BaseEntity]


def _master(slug: str, model: Type[e.BaseEntity]) -> Namespace:
    return Namespace(slug=slug, key=f"erp.master.{slug}", model=model)


MASTER_NAMESPACES: tuple[Namespace, ...] = (
    _master("category", e.Category),
    _master("finishing", e.Finishing),
    _master("material-type", e.MaterialType),
    _master("supplier", e.Supplier),
    _master("customer-type", e.CustomerType),
    _master("customer", e.Customer),
    _master("currency", e.Currency),
    _master("warehouse", e.Warehouse),
    _master("vehicle", e.Vehicle),
    _master("expedition", e.Expedition),
    _master("department", e.Department),
    _master("account", e.Account),
    _master("size", e.Size),
    _master("account-category", e.AccountCategory),
    _master("account-subcategory", e.AccountSubCategory),
    _master("project", e.Project),
    _master("promotion", e.Promotion),
    _master("armada", e.Armada),
    _master("origin", e.Origin),
    _master("bank-account", e.BankAccount),
    _master("vendor", e.Vendor),
    _master("item-supplier", e.SupplierItem),
    _master("product", e.Product),
)

DOCUMENT_NAMESPACES: tuple[Namespace, ...] = (
    Namespace("purchase-requests", "erp.purchasing.requests", e.PurchaseRequest),
    Namespace("purchase-orders", "erp.purchasing.orders", e.PurchaseOrder),
    Namespace("purchase-invoices", "erp.purchasing.invoices", e.PurchaseInvoice),
    Namespace("receive-items", "erp.warehouse.receive-items", e.ReceiveItems),
    Namespace("complaint-retur", "erp.warehouse.complaint-retur", e.ComplaintRetur),
    Namespace("skus", "erp.warehouse.skus", e.Sku),
)

ALL_NAMESPACES: tuple[Namespace, ...] = MASTER_NAMESPACES + DOCUMENT_NAMESPACES

"""Reference records written on first start, keyed by namespace."""
from __future__ import annotations

from typing import Any

MASTER_SEEDS: tuple[tuple[str, tuple[dict[str, Any], ...]], ...] = (
    ("erp.master.category", (
        {"code": "PAINT", "name": "Paint", "active": True, "description": "Paint products"},
        {"code": "TOOLS", "name": "Tools", "active": True, "description": "Tool products"},
    )),
    ("erp.master.finishing", (
        {"code": "MATTE", "name": "Matte", "active": True, "description": "Matte finish"},
        {"code": "GLOSS", "name": "Glossy", "active": True, "description": "Glossy finish"},
    )),
    ("erp.master.material-type", (
        {"code": "ALUM", "name": "Aluminium", "active": True, "description": "Aluminium material"},
        {"code": "STEEL", "name": "Steel", "active": True, "description": "Steel material"},
    )),
    ("erp.master.supplier", (
        {"code": "SUP001", "name": "PT Supplier One", "active": True, "email": "contact@supplier1.com",
         "phone": "+62123456789", "address": "Jl. Supplier 1", "city": "Jakarta", "ratingAvg": 4.5},
        {"code": "SUP002", "name": "CV Supplier Two", "active": True, "email": "info@supplier2.com",
         "phone": "+62123456790", "address": "Jl. Supplier 2", "city": "Bandung", "ratingAvg": 4.2},
    )),
    ("erp.master.customer-type", (
        {"code": "RETAIL", "name": "Retail", "active": True, "description": "Retail customers"},
        {"code": "WHOLESALE", "name": "Wholesale", "active": True, "description": "Wholesale customers"},
    )),
    ("erp.master.customer", (
        {"code": "CUST001", "name": "PT Customer One", "active": True, "email": "contact@customer1.com",
         "phone": "+62123456791", "address": "Jl. Customer 1", "typeId": "ms_retail"},
        {"code": "CUST002", "name": "CV Customer Two", "active": True, "email": "info@customer2.com",
         "phone": "+62123456792", "address": "Jl. Customer 2", "typeId": "ms_wholesale"},
    )),
    ("erp.master.currency", (
        {"code": "IDR", "name": "Indonesian Rupiah", "active": True, "symbol": "Rp", "rateToIDR": 1},
        {"code": "USD", "name": "US Dollar", "active": True, "symbol": "$", "rateToIDR": 15000},
    )),
    ("erp.master.warehouse", (
        {"code": "GDG-CMA", "name": "Gudang CMA", "active": True, "location": "Cikarang"},
        {"code": "GDG-PST", "name": "Gudang Pusat", "active": True, "location": "Jakarta"},
    )),
    ("erp.master.vehicle", (
        {"code": "TRK001", "name": "Truck 001", "active": True, "plateNo": "B 1234 XYZ", "capacity": 1000},
        {"code": "VAN001", "name": "Van 001", "active": True, "plateNo": "B 5678 ABC", "capacity": 500},
    )),
    ("erp.master.expedition", (
        {"code": "EXP001", "name": "Eksp. CV UTAMA", "active": True, "contact": "Budi", "phone": "+62123456793"},
    )),
    ("erp.master.department", (
        {"code": "SALES", "name": "Sales", "active": True, "head": "John Doe"},
        {"code": "WAREHOUSE", "name": "Warehouse", "active": True, "head": "Jane Smith"},
    )),
    ("erp.master.account", (
        {"code": "ACC-001", "name": "Cash", "active": True, "number": "1-001", "type": "asset"},
        {"code": "ACC-002", "name": "Bank", "active": True, "number": "1-002", "type": "asset"},
    )),
    ("erp.master.size", (
        {"code": "SML", "name": "Small", "active": True, "dimension": "10x10x5 cm"},
        {"code": "MED", "name": "Medium", "active": True, "dimension": "20x20x10 cm"},
    )),
    ("erp.master.account-category", (
        {"code": "ASSET", "name": "Assets", "active": True},
        {"code": "LIABILITY", "name": "Liabilities", "active": True},
    )),
    ("erp.master.account-subcategory", (
        {"code": "CURRENT", "name": "Current Assets", "active": True, "categoryId": "ms_asset"},
        {"code": "FIXED", "name": "Fixed Assets", "active": True, "categoryId": "ms_asset"},
    )),
    ("erp.master.project", (
        {"code": "PRJ001", "name": "Project Alpha", "active": True, "customerId": "ms_customer1",
         "pm": "Alice Johnson", "status": "open", "fee": 100000000},
    )),
    ("erp.master.promotion", (
        {"code": "PROMO01", "name": "New Year Promo", "active": True, "discountPct": 10,
         "startDate": "2024-01-01", "endDate": "2024-01-31"},
    )),
    ("erp.master.armada", (
        {"code": "ARM001", "name": "Armada 1", "active": True, "vehicleId": "ms_vehicle1", "driver": "Driver One"},
    )),
    ("erp.master.origin", (
        {"code": "IDN", "name": "Indonesia", "active": True, "address": "Jakarta, Indonesia"},
        {"code": "CHN", "name": "China", "active": True, "address": "Guangzhou, China"},
    )),
    ("erp.master.bank-account", (
        {"code": "BCA001", "name": "BCA Main Account", "active": True, "bankName": "Bank Central Asia",
         "accountNo": "1234567890", "holderName": "PT Company", "currencyCode": "IDR"},
    )),
    ("erp.master.vendor", (
        {"code": "VND001", "name": "Vendor One", "active": True, "contact": "Contact Person",
         "email": "vendor@example.com", "phone": "+62123456794"},
    )),
    ("erp.master.item-supplier", (
        {"code": "IS001", "name": "Item Supplier 1", "active": True, "supplierId": "ms_supplier1",
         "supplierSku": "SKU001", "price": 10000},
    )),
)

"""
ERP master-data backend.

Every master-data page, purchasing document type and warehouse document type
persists through the generic record store in ``erp.repositories``.
"""

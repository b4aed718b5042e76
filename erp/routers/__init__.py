"""
FastAPI routers.

Each file inside this package exposes an APIRouter that is included by
``erp.app.create_app``.
"""

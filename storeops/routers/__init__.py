"""
FastAPI routers.

build_resource_router produces one APIRouter per catalogued resource; app.py
includes them all.
"""

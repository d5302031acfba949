"""
System information endpoint.

Public build metadata the front end uses to render its footer and the
Swagger UI link.
"""
from __future__ import annotations

from fastapi import APIRouter

from ucsb_records.utils.system_info import get_system_info

router = APIRouter(prefix="/api", tags=["support"])


@router.get("/systemInfo")
def system_info():
    """Return build and deployment information for the running service."""
    return get_system_info()

"""
App assembly entry point.

Re-exports the FastAPI `app` from `ucsb_records.api.main` so the service can
be started with ``uvicorn app:app``.
"""

from ucsb_records.api.main import app  # noqa: F401

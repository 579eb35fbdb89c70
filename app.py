"""
App assembly entry point.

Re-exports the FastAPI `app` from `student_records.api.main` so servers can
be pointed at ``app:app``.
"""

from student_records.api.main import app  # noqa: F401

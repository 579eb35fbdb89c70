"""
Per-domain repository modules for database access.

Repositories own the SQLAlchemy queries; services compose them into
operations and decide where transactions end.
"""

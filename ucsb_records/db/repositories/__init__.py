"""
Per-entity repository modules for database access.

Each module binds a :class:`~ucsb_records.db.repositories.base.CrudRepository`
to one model and exposes get/list/create/update/delete functions.
"""

"""
models/ - Domain Models
=======================
Plain dataclasses for the persisted entities and the search criteria.
Repositories build them from database rows; no SQL lives here.
"""

"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive a `Database` handle, swallow and log storage errors,
and return domain model objects (or None / empty lists).
"""

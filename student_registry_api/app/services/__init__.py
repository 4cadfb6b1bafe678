"""
Service layer abstraction.

The storage service encapsulates every business rule of the registry.
Results are returned as data (entities, booleans or ``StorageError``
values) so the API layer decides how each outcome maps to HTTP.
"""

"""
Student Registry API.

A small REST service keeping students, courses and the enrollments
between them in memory.  The FastAPI application is assembled in
``student_registry_api.app.main``; business rules live in
``student_registry_api.app.services.storage_service``.
"""

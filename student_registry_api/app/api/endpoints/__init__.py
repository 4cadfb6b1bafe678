"""
Endpoint subpackage.

Each module defines an APIRouter for a specific domain (students,
courses, enrollments, health).  The routers are aggregated in
``api/router.py`` and then included in the main application.
"""

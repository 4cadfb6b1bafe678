"""
Dependencies shared by the endpoint routers.

The storage service is attached to ``app.state`` by ``create_app`` and
handed to handlers through ``get_storage`` so that every request of a
given application sees the same store, and separate applications
(e.g. one per test) never share state.
"""

from fastapi import Request

from student_registry_api.app.services.storage_service import StorageService


def get_storage(request: Request) -> StorageService:
    return request.app.state.storage

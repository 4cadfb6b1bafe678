"""
HTTP layer of the registry.

``router`` aggregates the domain routers defined in ``endpoints``;
``deps`` holds the FastAPI dependencies shared by them.
"""

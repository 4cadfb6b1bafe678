"""
Pydantic schema definitions for API payloads.

Each domain (students, courses, enrollments) defines its own Pydantic
models for request and response bodies.
"""

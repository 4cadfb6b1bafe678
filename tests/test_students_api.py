# This file tests the student routes end to end through the FastAPI app.
# Status codes and response envelopes are the contract checked here.

from __future__ import annotations

from fastapi.testclient import TestClient


def test_list_students_returns_seed(client: TestClient) -> None:
    response = client.get("/students")
    assert response.status_code == 200
    assert len(response.json()["students"]) == 3


def test_get_student(client: TestClient) -> None:
    response = client.get("/students/1")
    assert response.status_code == 200
    assert response.json()["student"] == {"id": 1, "name": "Alice", "email": "alice@example.com"}


def test_get_unknown_student_is_404(client: TestClient) -> None:
    response = client.get("/students/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Student not found"


def test_create_student(client: TestClient) -> None:
    response = client.post("/students", json={"name": "David", "email": "david@example.com"})
    assert response.status_code == 201
    assert response.json()["student"]["id"] == 4
    assert len(client.get("/students").json()["students"]) == 4


def test_create_student_duplicate_email_is_400(client: TestClient) -> None:
    response = client.post("/students", json={"name": "Eve", "email": "alice@example.com"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Email must be unique"


def test_create_student_without_email_is_422(client: TestClient) -> None:
    response = client.post("/students", json={"name": "Nobody"})
    assert response.status_code == 422


def test_update_student_returns_bare_entity(client: TestClient) -> None:
    response = client.put("/students/1", json={"name": "Alice Updated"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Alice Updated", "email": "alice@example.com"}


def test_update_unknown_student_is_404(client: TestClient) -> None:
    response = client.put("/students/999", json={"name": "Ghost"})
    assert response.status_code == 404


def test_delete_student_then_get_is_404(client: TestClient) -> None:
    response = client.delete("/students/1")
    assert response.status_code == 204
    assert client.get("/students/1").status_code == 404


def test_delete_unknown_student_is_404(client: TestClient) -> None:
    assert client.delete("/students/999").status_code == 404


def test_delete_enrolled_student_is_400(client: TestClient) -> None:
    client.post("/courses/1/students/1")
    response = client.delete("/students/1")
    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot delete student: enrolled in a course"
    assert client.get("/students/1").status_code == 200


def test_student_courses(client: TestClient) -> None:
    client.post("/courses/1/students/1")
    response = client.get("/students/1/courses")
    assert response.status_code == 200
    assert [course["title"] for course in response.json()["courses"]] == ["Math"]


def test_student_courses_unknown_student_is_404(client: TestClient) -> None:
    assert client.get("/students/999/courses").status_code == 404


def test_update_student_with_wrong_type_is_422(client: TestClient) -> None:
    response = client.put("/students/1", json={"email": 42})
    assert response.status_code == 422
    assert client.get("/students/1").json()["student"]["email"] == "alice@example.com"

import pytest

from core import db
from faculty import repository


class FacultyStore:
    """
    In-memory stand-in for faculty.repository.
    """

    def __init__(self):
        self.rows = {}
        self.next_id = 1

    async def list_faculty(self, *, category=None, search=None):
        rows = [row for row in self.rows.values() if row["is_visible"]]
        if category:
            rows = [row for row in rows if row["category"] == category]
        if search:
            needle = search.lower()
            rows = [
                row
                for row in rows
                if needle in row["name"].lower()
                or any(needle in interest.lower() for interest in row.get("research_interests") or [])
            ]
        return sorted(rows, key=lambda row: (row["sort_order"], row["name"], row["id"]))

    async def get_faculty_by_id(self, faculty_id):
        return self.rows.get(faculty_id)

    async def create_faculty(self, fields):
        if any(row["email"] and row["email"] == fields.get("email") for row in self.rows.values()):
            raise db.ConflictError("duplicate", constraint="faculty_email_key")
        row = {column: fields.get(column) for column in repository.WRITABLE_COLUMNS}
        row["id"] = self.next_id
        self.next_id += 1
        self.rows[row["id"]] = row
        return dict(row)

    async def update_faculty(self, faculty_id, fields):
        row = self.rows.get(faculty_id)
        if row is None:
            return None
        row.update({key: value for key, value in fields.items() if key in repository.WRITABLE_COLUMNS})
        return dict(row)

    async def delete_faculty(self, faculty_id):
        return self.rows.pop(faculty_id, None) is not None


@pytest.fixture
def store(monkeypatch):
    fake = FacultyStore()
    for name in ("list_faculty", "get_faculty_by_id", "create_faculty", "update_faculty", "delete_faculty"):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


def create(client, **overrides):
    body = {"name": "Wang Lei", "title": "Professor", "category": "professor", **overrides}
    return client.post("/api/faculty", json=body)


def test_create_then_get_round_trip(client, store):
    response = create(client, researchInterests=["Robotics", "Control"], email="wang@example.edu")

    assert response.status_code == 201
    created = response.json()
    assert created["sortOrder"] == 0
    assert created["isVisible"] is True

    fetched = client.get(f"/api/faculty/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["researchInterests"] == ["Robotics", "Control"]
    assert fetched.json()["email"] == "wang@example.edu"


def test_list_filters_and_orders(client, store):
    create(client, name="Zhou", sortOrder=2)
    create(client, name="Li", sortOrder=1, researchInterests=["Machine vision"])
    create(client, name="Chen", category="lecturer", sortOrder=1)
    create(client, name="Hidden", isVisible=False)

    names = [item["name"] for item in client.get("/api/faculty").json()["items"]]
    assert names == ["Chen", "Li", "Zhou"]

    body = client.get("/api/faculty", params={"category": "professor"}).json()
    assert [item["name"] for item in body["items"]] == ["Li", "Zhou"]
    assert body["total"] == 2

    body = client.get("/api/faculty", params={"search": "VISION"}).json()
    assert [item["name"] for item in body["items"]] == ["Li"]


def test_create_validation(client, store):
    response = client.post("/api/faculty", json={"title": "Professor", "category": "professor"})
    assert response.status_code == 400
    assert response.json() == {"error": "Name is required and must be a non-empty string"}

    response = create(client, researchInterests="robotics")
    assert response.status_code == 400
    assert response.json() == {"error": "ResearchInterests must be an array of strings"}

    response = create(client, sortOrder="1")
    assert response.status_code == 400
    assert store.rows == {}


def test_duplicate_is_409(client, store):
    create(client, email="dup@example.edu")
    response = create(client, name="Other", email="dup@example.edu")
    assert response.status_code == 409
    assert response.json()["error"].endswith("already exists")


def test_update_and_delete(client, store):
    faculty_id = create(client).json()["id"]

    response = client.put(f"/api/faculty/{faculty_id}", json={"office": "B-201", "email": None})
    assert response.status_code == 200
    assert response.json()["office"] == "B-201"

    assert client.put(f"/api/faculty/{faculty_id}", json={"createdAt": "x"}).status_code == 400
    assert client.put(f"/api/faculty/{faculty_id}", json={"name": ""}).status_code == 400

    assert client.delete(f"/api/faculty/{faculty_id}").json() == {"message": "Faculty member deleted successfully"}
    response = client.get(f"/api/faculty/{faculty_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "Faculty member not found"}


def test_invalid_id(client, store):
    response = client.get("/api/faculty/abc")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid faculty ID"}


def test_sort_order_must_fit_integer_column(client, store):
    response = create(client, sortOrder=2**40)
    assert response.status_code == 400
    assert response.json() == {"error": "SortOrder must be an integer"}
    assert store.rows == {}


def test_update_with_null_for_required_field_is_400(client, store):
    faculty_id = create(client).json()["id"]
    response = client.put(f"/api/faculty/{faculty_id}", json={"category": None})
    assert response.status_code == 400
    assert response.json() == {"error": "Category must be a non-empty string"}

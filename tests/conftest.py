"""
Pytest configuration file.
"""
import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from app.core.store import SpaceStore, get_store
from app.core.seed import MOCK_USERS
from app.models.space import Space, ManagerContact, SupervisorContact, Link, DocumentFile
from app.models.user import UserRole
from app.utils.qr_generator import build_qr_payload
from main import app


def make_space(space_id: str = "s1", name: str = "Lab A", **overrides) -> Space:
    """Build a fully-formed space record."""
    fields = dict(
        id=space_id,
        name=name,
        number="B-204",
        description="Electronics lab",
        photos=["file:///photos/lab-a.jpg"],
        manager=ManagerContact(
            name="Maria Lopez",
            email="m.lopez@university.edu",
            phone="+1-555-0199",
        ),
        academic_supervisor=SupervisorContact(
            name="Dr. Alan Grant",
            email="a.grant@university.edu",
            department="Electrical Engineering",
        ),
        access_requirements="Safety induction required",
        emergency_procedures="Use the east stairwell and call ext. 911",
        documentation=[
            DocumentFile(
                id="doc-1",
                name="safety.pdf",
                uri="file:///docs/safety.pdf",
                type="application/pdf",
                size=2048,
            )
        ],
        links=[Link(id="link-1", title="Booking", url="https://university.edu/book")],
        qr_code=build_qr_payload(space_id),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return Space(**fields)


@pytest.fixture(scope="function")
def store():
    """Fresh in-memory store for each test."""
    store = SpaceStore()
    yield store
    store.clear()


@pytest.fixture(scope="function")
def client(store):
    """Create test client."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_space(store):
    """Register an active sample space."""
    space = make_space()
    store.add_space(space)
    return space


@pytest.fixture
def deleted_space(store):
    """Register a space and move it to the recycle bin."""
    space = make_space("s-deleted", name="Old Workshop")
    store.add_space(space)
    store.delete_space(space.id)
    return space


@pytest.fixture
def admin_session(store):
    """Log the preset admin in."""
    user = MOCK_USERS[UserRole.ADMIN].model_copy()
    store.set_current_user(user)
    return user


@pytest.fixture
def user_session(store):
    """Log the preset student in."""
    user = MOCK_USERS[UserRole.USER].model_copy()
    store.set_current_user(user)
    return user


@pytest.fixture
def space_payload():
    """Valid create request body."""
    return {
        "name": "Robotics Lab",
        "number": "R-12",
        "description": "Robot arms and 3D printers",
        "photos": ["file:///photos/robotics.jpg"],
        "manager": {
            "name": "Sam Carter",
            "email": "s.carter@university.edu",
            "phone": "+1-555-0142",
        },
        "academicSupervisor": {
            "name": "Dr. Ada Byron",
            "email": "a.byron@university.edu",
            "department": "Mechanical Engineering",
        },
        "accessRequirements": "Badge access only",
        "emergencyProcedures": "Press the red stop button, then evacuate",
        "documentation": [
            {
                "name": "manual.pdf",
                "uri": "file:///docs/manual.pdf",
                "type": "application/pdf",
                "size": 4096,
            }
        ],
        "links": [
            {"title": "Wiki", "url": "https://university.edu/robotics"}
        ],
    }


@pytest.fixture
def space_factory():
    """Return the make_space builder."""
    return make_space

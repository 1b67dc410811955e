from app.models.space import Space, ManagerContact, SupervisorContact, Link
from app.models.user import User, UserRole
from app.utils.qr_generator import build_qr_payload
from app.core.store import SpaceStore


# Preset accounts for the mock login flow
MOCK_USERS = {
    UserRole.ADMIN: User(
        id="1",
        email="admin@university.edu",
        name="Admin User",
        role=UserRole.ADMIN,
        university_id="ADMIN001",
    ),
    UserRole.USER: User(
        id="2",
        email="student@university.edu",
        name="Student User",
        role=UserRole.USER,
        university_id="STU001",
    ),
}


def seed_mock_data(store: SpaceStore) -> Space:
    """
    Register the sample computer lab.
    Intended for development only.
    """
    space = Space(
        id="1",
        name="Computer Lab A",
        number="CL-101",
        description="Main computer laboratory with 30 workstations",
        photos=["https://images.unsplash.com/photo-1562774053-701939374585?w=400"],
        manager=ManagerContact(
            name="John Smith",
            email="j.smith@university.edu",
            phone="+1-555-0123",
        ),
        academic_supervisor=SupervisorContact(
            name="Dr. Jane Doe",
            email="j.doe@university.edu",
            department="Computer Science",
        ),
        access_requirements="Valid student ID required. Lab hours: 8 AM - 10 PM",
        emergency_procedures="In case of emergency, evacuate immediately and contact security at ext. 911",
        links=[
            Link(
                id="1",
                title="Lab Schedule",
                url="https://university.edu/lab-schedule",
                description="Current lab schedule and availability",
            )
        ],
        qr_code=build_qr_payload("1"),
    )
    store.add_space(space)
    return space

import pytest

from sassy import create_app
from sassy.core.auth.permissions import Role
from sassy.core.users.schemas import UserCreateRequest
from sassy.core.users.services import create_user
from sassy.extensions import db

DEFAULT_PASSWORD = "secret123"


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app(tmp_path):
    """Per-test app backed by a fresh in-memory database and upload folder."""
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


def _make_user(name: str, role: Role = Role.EDITOR, password: str = DEFAULT_PASSWORD):
    return create_user(UserCreateRequest(name=name, password=password, role=role))


def _login(client, name: str, password: str = DEFAULT_PASSWORD):
    return client.post("/api/auth/login", json={"name": name, "password": password})


@pytest.fixture()
def make_user(app):
    """Factory creating a staff user with the default password."""
    return _make_user


@pytest.fixture()
def login():
    """Log a test client in by name."""
    return _login


@pytest.fixture()
def admin_user(app):
    return _make_user("admin", Role.ADMIN)


@pytest.fixture()
def editor_user(app):
    return _make_user("editor", Role.EDITOR)


@pytest.fixture()
def admin_client(app, admin_user):
    client = app.test_client()
    assert _login(client, admin_user.name).status_code == 200
    return client


@pytest.fixture()
def editor_client(app, editor_user):
    client = app.test_client()
    assert _login(client, editor_user.name).status_code == 200
    return client

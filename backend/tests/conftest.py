import pytest

from portfolio import create_app
from portfolio.extensions import db
from portfolio.models.user import AdminUser

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", overrides={"UPLOAD_FOLDER": str(tmp_path / "uploads")})

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(app, client):
    user = AdminUser(email=ADMIN_EMAIL, role="admin")
    user.set_password(ADMIN_PASSWORD)
    db.session.add(user)
    db.session.commit()

    response = client.post("/api/v1/auth/login", json={
        "email": ADMIN_EMAIL,
        "password": ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture
def create(client, admin_headers):
    """POST a record to an admin collection and return the created JSON."""
    def _create(collection, **data):
        response = client.post(f"/api/v1/admin/{collection}", json=data, headers=admin_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _create

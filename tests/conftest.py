"""
Fixtures compartidas: app en SQLite en memoria y un reCAPTCHA simulado.
"""
import pytest
import requests

from contacto_api import create_app, db, gateway
from contacto_api.security import hash_password

TEST_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "clave-de-pruebas",
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "SQLALCHEMY_ENGINE_OPTIONS": {},
    "RECAPTCHA_SECRET_KEY": "secreto-captcha",
    "RECAPTCHA_VERIFY_URL": "https://captcha.invalid/siteverify",
    "TOKEN_MAX_AGE": 3600,
    "ALLOW_BOOTSTRAP": True,
}

VALID_CONTACT = {
    "name": "Ana López",
    "email": "ana@correo.com",
    "phone": "5512345678",
    "message": "Quisiera información sobre sus servicios.",
    "captcha": "token-del-widget",
}


class FakeCaptcha:
    """Sustituye requests.post y registra cada llamada."""

    def __init__(self, success=True, error=None, response=None):
        self.success = success
        self.error = error
        self.response = response
        self.calls = []

    def __call__(self, url, data=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "data": data, "timeout": timeout})
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return FakeResponse({"success": self.success, "error-codes": [] if self.success else ["invalid-input-response"]})


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self._payload


@pytest.fixture
def app_config():
    return dict(TEST_CONFIG)


@pytest.fixture
def valid_contact():
    return dict(VALID_CONTACT)


@pytest.fixture
def contact_payload():
    """Devuelve el formulario válido con los cambios indicados."""
    def _payload(**changes):
        data = dict(VALID_CONTACT)
        data.update(changes)
        return data
    return _payload


@pytest.fixture
def app(app_config):
    app = create_app(app_config)
    with app.app_context():
        db.create_all()
    # Sin contexto activo durante las peticiones: cada una obtiene su propio g
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_captcha(monkeypatch):
    """Instala un FakeCaptcha construido con los argumentos dados."""
    def _install(**kwargs):
        fake = FakeCaptcha(**kwargs)
        monkeypatch.setattr("contacto_api.captcha.requests.post", fake)
        return fake
    return _install


@pytest.fixture
def captcha_response():
    return FakeResponse


@pytest.fixture
def captcha_ok(fake_captcha):
    return fake_captcha(success=True)


@pytest.fixture
def captcha_fail(fake_captcha):
    return fake_captcha(success=False)


@pytest.fixture
def staff_user(app):
    with app.app_context():
        user_id = gateway.insert_user("Admin", "admin@correo.com", hash_password("clave-admin"))
    return {"id": user_id, "email": "admin@correo.com", "name": "Admin", "password": "clave-admin"}


@pytest.fixture
def auth_headers(client, staff_user):
    resp = client.post("/api/login", json={"email": staff_user["email"], "password": staff_user["password"]})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}

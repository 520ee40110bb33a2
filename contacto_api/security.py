# contacto_api/security.py
"""Hash de contraseñas y tokens de sesión firmados.

Los tokens los firma itsdangerous con ``SECRET_KEY`` (el mismo firmador que usa
Flask para su cookie de sesión) y caducan a los ``TOKEN_MAX_AGE`` segundos.
"""
from flask import current_app
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from werkzeug.security import check_password_hash, generate_password_hash

TOKEN_SALT = "sesion"
HASH_METHOD = "pbkdf2:sha256:600000"
SALT_LENGTH = 16


def hash_password(password: str) -> str:
    return generate_password_hash(password, method=HASH_METHOD, salt_length=SALT_LENGTH)


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)


def _serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"], salt=TOKEN_SALT)


def issue_token(user) -> str:
    claims = {"id": user["id"], "email": user["email"], "name": user["name"]}
    return _serializer().dumps(claims)


def read_token(token: str, max_age=None):
    """Devuelve los claims del token o ``None`` si es inválido o ha caducado."""
    if max_age is None:
        max_age = current_app.config.get("TOKEN_MAX_AGE", 3600)
    try:
        claims = _serializer().loads(token, max_age=max_age)
    except SignatureExpired:
        current_app.logger.info("Token caducado")
        return None
    except BadSignature:
        current_app.logger.warning("Token con firma inválida")
        return None
    if not isinstance(claims, dict) or "id" not in claims:
        return None
    return claims


def public_user(user) -> dict:
    return {"id": user["id"], "email": user["email"], "name": user["name"]}

# contacto_api/auth.py
from functools import wraps

from flask import current_app, jsonify
from flask_login import current_user

from contacto_api import StaffUser, gateway, login_manager
from contacto_api.security import read_token


def load_user_from_request(req):
    header = req.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    claims = read_token(token.strip())
    if not claims:
        return None
    return StaffUser(claims["id"], claims.get("email"), claims.get("name"))


def unauthorized():
    return jsonify({"error": "No autorizado"}), 401


def staff_or_bootstrap(func):
    """Como login_required, pero deja pasar mientras no exista ningún usuario.

    Con ALLOW_BOOTSTRAP desactivado el primer usuario solo se crea con
    ``flask create-user``.
    """
    @wraps(func)
    def wrapped(*args, **kwargs):
        if current_user.is_authenticated:
            return func(*args, **kwargs)
        if current_app.config.get("ALLOW_BOOTSTRAP") and gateway.count_users() == 0:
            return func(*args, **kwargs)
        return login_manager.unauthorized()
    return wrapped

# contacto_api/routes.py
from flask import Blueprint, jsonify, request, current_app as app
from flask_login import login_required
from werkzeug.exceptions import InternalServerError

from contacto_api import gateway
from contacto_api.auth import staff_or_bootstrap
from contacto_api.captcha import verify_captcha
from contacto_api.errors import ApiError, AuthError, CaptchaError, NotFoundError
from contacto_api.schemas import (
    MSG_CAMPOS_REQUERIDOS, MSG_ESTADO_INVALIDO, MSG_LOGIN_REQUERIDO,
    ContactForm, LoginForm, NewUserForm, StatusUpdate, parse,
)
from contacto_api.security import hash_password, issue_token, public_user, verify_password

bp = Blueprint("routes", __name__)

ERROR_INTERNO = "Error interno del servidor"
CREDENCIALES_INVALIDAS = "Credenciales inválidas"


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _error_interno():
    return jsonify({"error": ERROR_INTERNO}), 500


@bp.app_errorhandler(ApiError)
def _api_error(e: ApiError):
    return jsonify({"error": e.message}), e.status_code


@bp.app_errorhandler(InternalServerError)
def _internal_error(e):
    original = getattr(e, "original_exception", None)
    if original is not None:
        app.logger.error("Error no controlado: %r", original)
    return _error_interno()


# ===== Home
@bp.get("/")
def home():
    return "Servidor funcionando correctamente!", 200, {"Content-Type": "text/plain; charset=utf-8"}


# ===== Mensajes
@bp.get("/api/mensajes")
@login_required
def api_mensajes():
    try:
        return jsonify(gateway.list_messages()), 200
    except Exception as e:
        app.logger.exception("Error al obtener mensajes: %s", e)
        return _error_interno()


@bp.post("/api/contact")
def api_contact():
    form = parse(ContactForm, _json_body())

    try:
        captcha_ok = verify_captcha(form.captcha, remote_ip=request.remote_addr)
    except Exception as e:
        app.logger.exception("Error verificando captcha: %s", e)
        return _error_interno()
    if not captcha_ok:
        raise CaptchaError("Captcha inválido. Intenta nuevamente.")

    try:
        mensaje_id = gateway.insert_message(form.name, form.email, form.phone, form.message)
    except Exception as e:
        app.logger.exception("Error al guardar mensaje: %s", e)
        return _error_interno()

    app.logger.info("Mensaje %s guardado (%s)", mensaje_id, form.email)
    return jsonify({"message": "Mensaje guardado correctamente."}), 200


@bp.put("/api/mensajes/<int:mensaje_id>/status")
@login_required
def api_mensaje_status(mensaje_id: int):
    body = parse(StatusUpdate, _json_body(), MSG_ESTADO_INVALIDO)

    try:
        afectadas = gateway.update_message_status(mensaje_id, body.status)
    except Exception as e:
        app.logger.exception("Error al actualizar estado: %s", e)
        return _error_interno()

    if afectadas == 0:
        raise NotFoundError("Mensaje no encontrado")

    app.logger.info("Mensaje %s -> %s", mensaje_id, body.status)
    return jsonify({"message": "Estado actualizado correctamente"}), 200


# ===== Usuarios / login
@bp.post("/api/login")
def api_login():
    form = parse(LoginForm, _json_body(), MSG_LOGIN_REQUERIDO)

    try:
        user = gateway.find_user_by_email(form.email)
        valido = user is not None and verify_password(form.password, user["password_hash"])
        token = issue_token(user) if valido else None
    except Exception as e:
        app.logger.exception("Error en login: %s", e)
        return _error_interno()

    # Mismo mensaje para email inexistente y contraseña incorrecta
    if not valido:
        app.logger.warning("Login fallido para %s", form.email)
        raise AuthError(CREDENCIALES_INVALIDAS)

    return jsonify({"token": token, "user": public_user(user)}), 200


@bp.post("/api/insert-user")
@staff_or_bootstrap
def api_insert_user():
    form = parse(NewUserForm, _json_body(), MSG_CAMPOS_REQUERIDOS)

    try:
        user_id = gateway.insert_user(form.name, form.email, hash_password(form.password))
    except Exception as e:
        app.logger.exception("Error al insertar usuario: %s", e)
        return _error_interno()

    app.logger.info("Usuario %s creado (id=%s)", form.email, user_id)
    return jsonify({"message": "Usuario creado exitosamente"}), 201

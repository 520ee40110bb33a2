# contacto_api/__init__.py
import logging

import click
from flask import Flask
from flask_cors import CORS
from flask_login import LoginManager, UserMixin
from flask_sqlalchemy import SQLAlchemy
from werkzeug.middleware.proxy_fix import ProxyFix

from config import Config

db = SQLAlchemy()
login_manager = LoginManager()


class StaffUser(UserMixin):
    """Usuario autenticado reconstruido desde los claims del token."""

    def __init__(self, user_id, email: str, name: str):
        self.id = user_id
        self.email = email
        self.name = name


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("Define JWT_SECRET (o SECRET_KEY) antes de iniciar el servidor")

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO))

    if not app.config.get("RECAPTCHA_SECRET_KEY"):
        app.logger.warning("RECAPTCHA_SECRET_KEY no está configurado; la verificación de captcha fallará")

    if app.config.get("TRUST_PROXY"):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    # Extensiones
    db.init_app(app)
    login_manager.init_app(app)
    CORS(app, resources={r"/api/*": {"origins": app.config.get("ALLOWED_ORIGIN", "*")}})

    from .auth import load_user_from_request, unauthorized  # noqa
    login_manager.request_loader(load_user_from_request)
    login_manager.unauthorized_handler(unauthorized)

    # Blueprint principal
    from .routes import bp as routes_bp
    app.register_blueprint(routes_bp)

    from contacto_api import models  # noqa
    _register_cli(app)
    return app


def _register_cli(app):
    from . import gateway
    from .security import hash_password

    @app.cli.command("init-db")
    def init_db():
        """Crea las tablas mensajes y users si no existen."""
        db.create_all()
        click.echo("Tablas creadas.")

    @app.cli.command("create-user")
    @click.argument("name")
    @click.argument("email")
    @click.password_option()
    def create_user(name, email, password):
        """Crea un usuario del personal con contraseña hasheada."""
        user_id = gateway.insert_user(name, email, hash_password(password))
        click.echo(f"Usuario {email} creado (id={user_id}).")

# contacto_api/models.py
from datetime import datetime

from contacto_api import db

ESTADOS_VALIDOS = ("nuevo", "contactado", "descartado")


class Mensaje(db.Model):
    __tablename__ = "mensajes"
    __table_args__ = (
        db.CheckConstraint(
            "status IN ('nuevo', 'contactado', 'descartado')", name="ck_mensajes_status"
        ),
    )
    id          = db.Column(db.Integer, primary_key=True)
    name        = db.Column(db.String(100), nullable=False)
    email       = db.Column(db.String(255), nullable=False, index=True)
    phone       = db.Column(db.String(20), nullable=False)
    message     = db.Column(db.Text, nullable=False)
    status      = db.Column(db.String(20), nullable=False, default="nuevo", server_default="nuevo")
    # Fijado al insertar; ninguna ruta lo actualiza
    created_at  = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)


class Usuario(db.Model):
    __tablename__ = "users"
    id            = db.Column(db.Integer, primary_key=True)
    name          = db.Column(db.String(100), nullable=False)
    email         = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

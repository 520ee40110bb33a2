# contacto_api/gateway.py
"""Acceso a las tablas ``mensajes`` y ``users``.

Todas las sentencias usan parámetros enlazados. Las escrituras hacen commit y,
ante cualquier error, rollback antes de propagar la excepción.
"""
from sqlalchemy import text

from contacto_api import db
from contacto_api.models import Mensaje, Usuario


def _row_to_dict(row):
    try:
        return dict(row._mapping)
    except AttributeError:
        return dict(row)


def query(sql: str, params=None):
    return [_row_to_dict(r) for r in db.session.execute(text(sql), params or {}).all()]


def execute(sql: str, params=None) -> int:
    try:
        result = db.session.execute(text(sql), params or {})
        db.session.commit()
        return result.rowcount
    except Exception:
        db.session.rollback()
        raise


def _add(obj) -> int:
    try:
        db.session.add(obj)
        db.session.commit()
        return obj.id
    except Exception:
        db.session.rollback()
        raise


# ===== mensajes
def insert_message(name: str, email: str, phone: str, message: str) -> int:
    return _add(Mensaje(name=name, email=email, phone=phone, message=message, status="nuevo"))


def list_messages():
    return query("""
        SELECT id, name, email, phone, message, status
        FROM mensajes
        ORDER BY created_at DESC, id DESC
    """)


def update_message_status(message_id: int, status: str) -> int:
    return execute(
        "UPDATE mensajes SET status = :status WHERE id = :id",
        {"status": status, "id": message_id},
    )


# ===== users
def find_user_by_email(email: str):
    rows = query(
        "SELECT id, name, email, password_hash FROM users WHERE email = :email LIMIT 1",
        {"email": email},
    )
    return rows[0] if rows else None


def insert_user(name: str, email: str, password_hash: str) -> int:
    return _add(Usuario(name=name, email=email, password_hash=password_hash))


def count_users() -> int:
    return db.session.execute(text("SELECT COUNT(*) FROM users")).scalar() or 0

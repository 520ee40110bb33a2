import os

from dotenv import load_dotenv

load_dotenv()


def _int_env(name, default=None):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


class Config:
    PORT = _int_env("PORT", 5000)

    # Firma de tokens; sin valor por defecto (create_app falla si falta)
    SECRET_KEY = os.getenv("JWT_SECRET") or os.getenv("SECRET_KEY")
    TOKEN_MAX_AGE = _int_env("TOKEN_MAX_AGE", 3600)
    # Alta abierta de usuarios mientras la tabla users está vacía
    ALLOW_BOOTSTRAP = os.getenv("ALLOW_BOOTSTRAP", "1") == "1"

    # PostgreSQL config
    DB_NAME = os.getenv("DB_NAME")
    DB_USER = os.getenv("DB_USER")
    DB_PASS = os.getenv("DB_PASS")
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = os.getenv("DB_PORT", "5432")

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or (
        f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
        if DB_NAME and DB_USER else "sqlite:///contacto.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # reCAPTCHA
    RECAPTCHA_SECRET_KEY = os.getenv("RECAPTCHA_SECRET_KEY")
    RECAPTCHA_VERIFY_URL = os.getenv(
        "RECAPTCHA_VERIFY_URL", "https://www.google.com/recaptcha/api/siteverify"
    )
    RECAPTCHA_TIMEOUT = _int_env("RECAPTCHA_TIMEOUT")

    ALLOWED_ORIGIN = os.getenv("ALLOWED_ORIGIN", "*")
    TRUST_PROXY = os.getenv("TRUST_PROXY", "0") == "1"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

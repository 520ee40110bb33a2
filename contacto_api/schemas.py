# contacto_api/schemas.py
"""
Validación declarativa de los cuerpos JSON de entrada (Pydantic).

El formulario de contacto aplica longitudes y formato; login y alta de usuario
solo comprueban presencia. Ante un error se informa únicamente del primer
campo que falla.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from contacto_api.errors import ValidationError
from contacto_api.models import ESTADOS_VALIDOS

MSG_LOGIN_REQUERIDO = "Email y contraseña son requeridos"
MSG_CAMPOS_REQUERIDOS = "Todos los campos son requeridos"
MSG_ESTADO_INVALIDO = "Estado inválido"


class ContactForm(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=3, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=7, max_length=20)
    message: str = Field(min_length=5, max_length=1000)
    captcha: str = Field(min_length=1)

    @field_validator("name", "email", "phone", "message", mode="before")
    @classmethod
    def _trim(cls, value):
        return value.strip() if isinstance(value, str) else value


class LoginForm(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class NewUserForm(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class StatusUpdate(BaseModel):
    status: Literal[ESTADOS_VALIDOS]


def describe_error(error: dict) -> str:
    field = ".".join(str(p) for p in error.get("loc", ())) or "body"
    kind = error.get("type")
    ctx = error.get("ctx") or {}
    if kind == "missing":
        return f'"{field}" es obligatorio'
    if kind == "string_too_short":
        if ctx.get("min_length") == 1:
            return f'"{field}" no puede estar vacío'
        return f'"{field}" debe tener al menos {ctx.get("min_length")} caracteres'
    if kind == "string_too_long":
        return f'"{field}" debe tener como máximo {ctx.get("max_length")} caracteres'
    if kind == "string_type":
        return f'"{field}" debe ser un texto'
    if kind == "extra_forbidden":
        return f'"{field}" no está permitido'
    if field == "email":
        return f'"{field}" debe ser un correo válido'
    return f'"{field}" {error.get("msg", "no es válido")}'


def parse(model, data, message: str = None):
    """Valida ``data`` con ``model``; lanza ValidationError con el primer fallo.

    Si se indica ``message`` se usa como texto genérico en lugar del detalle.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(message or describe_error(e.errors()[0]))

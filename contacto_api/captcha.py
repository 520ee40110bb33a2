# contacto_api/captcha.py
"""
Verificación de reCAPTCHA contra el endpoint siteverify de Google.

Una sola llamada, sin reintentos. Los errores de red o de HTTP se propagan al
llamador, que los trata como cualquier otro fallo interno.
"""
import logging

import requests
from flask import current_app

logger = logging.getLogger(__name__)


def verify_captcha(token: str, remote_ip: str = None) -> bool:
    """
    Verifica un token de reCAPTCHA.

    Args:
        token: respuesta del widget enviada por el formulario
        remote_ip: IP del visitante, opcional

    Returns:
        True si el servicio responde ``success: true``.

    Raises:
        requests.exceptions.RequestException: fallo de red o respuesta no 2xx
    """
    payload = {
        "secret": current_app.config.get("RECAPTCHA_SECRET_KEY") or "",
        "response": token,
    }
    if remote_ip:
        payload["remoteip"] = remote_ip

    response = requests.post(
        current_app.config["RECAPTCHA_VERIFY_URL"],
        data=payload,
        timeout=current_app.config.get("RECAPTCHA_TIMEOUT"),
    )
    response.raise_for_status()
    result = response.json()

    if result.get("success") is True:
        return True

    logger.warning("reCAPTCHA rechazado: %s", result.get("error-codes", []))
    return False

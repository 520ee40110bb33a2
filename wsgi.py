# wsgi.py
from contacto_api import create_app

app = create_app()

if __name__ == "__main__":
    # Solo para desarrollo local; en producción usar gunicorn: `gunicorn wsgi:app`
    app.run(host="0.0.0.0", port=app.config["PORT"])

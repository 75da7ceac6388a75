"""WSGI entrypoint for deploying the translation proxy behind Passenger or gunicorn."""

from unitrans.backend.app import create_app

# Passenger looks for a module-level variable named ``application``.
application = create_app()

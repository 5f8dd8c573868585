"""Entrypoint module for production deployment.

This module creates the FastAPI application instance for use with uvicorn/gunicorn.
"""

from bookcars_locale.app import create_app

app = create_app()

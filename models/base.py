"""
Database Base Module

Holds the shared SQLAlchemy instance. Kept in its own module so models and
services can import it without importing the Flask app.
"""

from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app with db.init_app() in app.py
db = SQLAlchemy()


def isoformat(value):
    """Serialize a date/datetime for JSON responses (None stays None)."""
    return value.isoformat() if value is not None else None


def now():
    """Naive local timestamp used for all stored datetimes."""
    return datetime.now()

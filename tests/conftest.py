"""
Pytest configuration and fixtures for the kitchen app tests.
"""

import os
from datetime import datetime
from types import SimpleNamespace

import pytest

# Select the in-memory testing config before the app module is imported
os.environ["KITCHEN_ENV"] = "testing"

from app import app as flask_app  # noqa: E402
from models import db  # noqa: E402

NOW = datetime(2026, 6, 15, 12, 0, 0)


@pytest.fixture
def app():
    """App with a fresh in-memory database."""
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def now():
    """Fixed reference time for recency and expiry rules."""
    return NOW


# ============================================
# PLAIN OBJECT BUILDERS
# ============================================
# The services only read attributes, so unit tests use SimpleNamespace
# stand-ins instead of database rows.

def build_ingredient(name, required=True, substitutions=None):
    return SimpleNamespace(name=name, required=required, substitutions=substitutions or [])


def build_log(rating, cooked_on, would_repeat=True, served_to=None, recipe=None):
    return SimpleNamespace(rating=rating, cooked_on=cooked_on, would_repeat=would_repeat,
                           served_to=served_to, recipe=recipe,
                           recipe_id=recipe.id if recipe is not None else None)


def build_recipe(id=1, title="Recipe", ingredients=(), total_min=30, servings=2,
                 servings_max=None, equipment=None, tags=None, seasons=None, cuisine=None,
                 complexity="FAMILIAR", cook_logs=None, techniques=None):
    """Recipe stand-in; `ingredients` may mix names and build_ingredient() results."""
    return SimpleNamespace(
        id=id,
        title=title,
        ingredients=[i if isinstance(i, SimpleNamespace) else build_ingredient(i) for i in ingredients],
        total_min=total_min,
        servings=servings,
        servings_max=servings_max,
        equipment=equipment or [],
        tags=tags or [],
        seasons=seasons or [],
        cuisine=cuisine,
        complexity=complexity,
        cook_logs=cook_logs or [],
        techniques=[SimpleNamespace(technique=SimpleNamespace(name=t)) for t in (techniques or [])],
    )


def build_batch(expires_on=None, cost_cents=None, created_at=NOW):
    return SimpleNamespace(expires_on=expires_on, cost_cents=cost_cents, created_at=created_at)


def build_item(name, batches=(), staple=False, default_cost_cents=None):
    return SimpleNamespace(name=name, batches=list(batches), staple=staple,
                           default_cost_cents=default_cost_cents)


def build_technique(name, comfort=0, difficulty=2, id=1, recipes=()):
    return SimpleNamespace(id=id, name=name, comfort=comfort, difficulty=difficulty,
                           recipes=list(recipes))


@pytest.fixture
def make_ingredient():
    return build_ingredient


@pytest.fixture
def make_recipe():
    return build_recipe


@pytest.fixture
def make_log():
    return build_log


@pytest.fixture
def make_batch():
    return build_batch


@pytest.fixture
def make_item():
    return build_item


@pytest.fixture
def make_technique():
    return build_technique

import os
import sys
from pathlib import Path

import pytest

os.environ["FLASK_ENV"] = "testing"

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app import app as flask_app
from models import db
from services import CostSettings


@pytest.fixture(name="app")
def app_fixture():
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture(name="client")
def client_fixture(app):
    return app.test_client()


@pytest.fixture(name="settings")
def settings_fixture():
    return CostSettings()

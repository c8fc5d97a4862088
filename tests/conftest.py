import pytest
from fastapi.testclient import TestClient

from employee_form.main import app
from employee_form.core.form_controller import FormController


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def form():
    """Fresh form in its initial state: empty fields, no flags, dialog closed"""
    return FormController()

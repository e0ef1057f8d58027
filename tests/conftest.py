from __future__ import annotations

from datetime import date

import pytest

from employee_tracker.database.extensions import db
from employee_tracker.employees.model import Employee
from employee_tracker.main import create_app


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"AUTO_INIT_DB": False, "AUTO_SEED_DB": False})
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def container(app):
    return app.extensions["container"]


@pytest.fixture()
def make_employee(app):
    counter = {"n": 0}

    def _make(name: str = "John Doe", *, code: str | None = None, is_active: bool = True) -> Employee:
        counter["n"] += 1
        code = code or f"EMP{counter['n']:03d}"
        employee = Employee(
            name=name,
            email=f"{code.lower()}@company.com",
            employee_code=code,
            department="Engineering",
            join_date=date(2024, 1, 1),
            is_active=is_active,
        )
        db.session.add(employee)
        db.session.commit()
        return employee

    return _make

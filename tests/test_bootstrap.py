import logging

from employee_tracker.common.logging import HANDLER_NAME, configure_logging
from employee_tracker.database.bootstrap import MySQLServer, init_schema, seed_demo_data
from employee_tracker.employees.model import Employee


def test_server_settings_fall_back_to_defaults():
    server = MySQLServer.from_config({"host": "db", "port": "3307", "database": ""})

    assert (server.host, server.port, server.user, server.schema) == ("db", 3307, "root", "employee_tracker")
    assert server.label == "root@db:3307/employee_tracker"


def test_schema_name_is_quoted():
    sql = MySQLServer(schema="odd`name").create_schema_sql()

    assert sql.startswith("CREATE DATABASE IF NOT EXISTS `odd``name`")
    assert "utf8mb4" in sql


def test_init_schema_on_sqlite_creates_every_table(app):
    tables = init_schema(database_uri=app.config["SQLALCHEMY_DATABASE_URI"], db_config={})

    assert {"employees", "attendance_records", "breaks", "issues", "warnings"} <= set(tables)


def test_seed_only_fills_empty_tables(app):
    assert seed_demo_data() > 0
    assert seed_demo_data() == 0
    assert Employee.query.filter_by(employee_code="ADMIN001").count() == 1


def test_configure_logging_adds_one_handler():
    configure_logging("debug")
    package = configure_logging("warning")

    assert package.level == logging.WARNING
    assert [h.get_name() for h in package.handlers].count(HANDLER_NAME) == 1
    assert configure_logging("nonsense").level == logging.INFO

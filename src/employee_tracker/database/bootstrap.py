from __future__ import annotations

import importlib
from dataclasses import dataclass
from datetime import date

import mysql.connector
from sqlalchemy import inspect

from ..common.logging import get_logger
from .extensions import db
from .session import session_scope

logger = get_logger(__name__)

MODEL_MODULES = (
    "employee_tracker.employees.model",
    "employee_tracker.attendance.model",
    "employee_tracker.uploads.model",
    "employee_tracker.flowace.model",
    "employee_tracker.assets.model",
    "employee_tracker.assignments.model",
    "employee_tracker.logs.model",
    "employee_tracker.breaks.model",
    "employee_tracker.issues.model",
    "employee_tracker.warnings.model",
)


@dataclass(frozen=True)
class MySQLServer:
    """Server-level connection settings taken from ``DB_CONFIG``."""

    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    schema: str = "employee_tracker"

    @classmethod
    def from_config(cls, db_config: dict) -> "MySQLServer":
        defaults = cls()
        return cls(
            host=str(db_config.get("host") or defaults.host),
            port=int(db_config.get("port") or defaults.port),
            user=str(db_config.get("user") or defaults.user),
            password=str(db_config.get("password") or ""),
            schema=str(db_config.get("database") or defaults.schema),
        )

    @property
    def label(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.schema}"

    def create_schema_sql(self) -> str:
        name = self.schema.replace("`", "``")
        return f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"


def import_models() -> None:
    """Register every mapped class on ``db.metadata`` so relationships resolve."""
    for module in MODEL_MODULES:
        importlib.import_module(module)


def ensure_database_exists(db_config: dict) -> None:
    server = MySQLServer.from_config(db_config)
    conn = mysql.connector.connect(
        host=server.host,
        port=server.port,
        user=server.user,
        password=server.password,
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(server.create_schema_sql())
        conn.commit()
    finally:
        conn.close()
    logger.info("Ensured database %s", server.label)


def init_schema(*, database_uri: str, db_config: dict) -> list[str]:
    """Create missing tables; must run inside an app context."""
    if database_uri.startswith("mysql"):
        ensure_database_exists(db_config)
    import_models()
    db.create_all()
    return list_tables()


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def seed_demo_data() -> int:
    """Insert demo employees, tags and assets when the tables are empty. Returns rows added."""
    from ..assets.model import Asset
    from ..assignments.model import Tag
    from ..employees.model import Employee

    added = 0
    with session_scope() as session:
        if not Employee.query.first():
            session.add_all(
                [
                    Employee(
                        name="Admin User",
                        email="admin@company.com",
                        employee_code="ADMIN001",
                        role="admin",
                        department="Management",
                        designation="Administrator",
                        join_date=date(2024, 1, 1),
                    ),
                    Employee(
                        name="John Doe",
                        email="john.doe@company.com",
                        employee_code="EMP001",
                        department="Engineering",
                        designation="Developer",
                        join_date=date(2024, 1, 15),
                    ),
                    Employee(
                        name="Jane Smith",
                        email="jane.smith@company.com",
                        employee_code="EMP002",
                        department="Operations",
                        designation="Analyst",
                        join_date=date(2024, 2, 1),
                    ),
                ]
            )
            added += 3
        if not Tag.query.first():
            session.add_all(
                [
                    Tag(tag_name="Data Entry", time_minutes=5),
                    Tag(tag_name="Quality Check", time_minutes=10),
                    Tag(tag_name="Report Review", time_minutes=15),
                ]
            )
            added += 3
        if not Asset.query.first():
            session.add_all(
                [
                    Asset(asset_name="Dell Latitude 5420", asset_type="LAPTOP", serial_number="DL5420-0001", brand="Dell"),
                    Asset(asset_name="LG 24MK430H", asset_type="MONITOR", serial_number="LG24-0001", brand="LG"),
                ]
            )
            added += 2
    logger.info("Seeded %d demo rows", added)
    return added

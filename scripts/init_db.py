from __future__ import annotations

from employee_tracker.database.bootstrap import MySQLServer, init_schema
from employee_tracker.main import create_app


def main() -> None:
    app = create_app({"AUTO_INIT_DB": False})
    db_config = dict(app.config.get("DB_CONFIG", {}))
    with app.app_context():
        tables = init_schema(database_uri=app.config["SQLALCHEMY_DATABASE_URI"], db_config=db_config)
    print(
        "OK: Created schema -> "
        f"{MySQLServer.from_config(db_config).label} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()

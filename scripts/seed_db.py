from __future__ import annotations

from employee_tracker.database.bootstrap import MySQLServer, init_schema, seed_demo_data
from employee_tracker.main import create_app


def main() -> None:
    app = create_app({"AUTO_INIT_DB": False})
    db_config = dict(app.config.get("DB_CONFIG", {}))
    with app.app_context():
        init_schema(database_uri=app.config["SQLALCHEMY_DATABASE_URI"], db_config=db_config)
        added = seed_demo_data()
    print(
        "OK: Seeded database -> "
        f"{MySQLServer.from_config(db_config).label} "
        f"(rows added={added})"
    )


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging

from dotenv import load_dotenv

from employee_attendance.config import load_settings
from employee_attendance.database.bootstrap import apply_schema, list_tables
from employee_attendance.logging_config import configure_logging

logger = logging.getLogger("employee_attendance.scripts.init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(settings.log_level)

    db_config = dict(settings.db_config)
    apply_schema(db_config)
    tables = list_tables(db_config)
    logger.info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        len(tables),
    )


if __name__ == "__main__":
    main()

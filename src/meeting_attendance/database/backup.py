from __future__ import annotations

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Sequence

from .connection import DBConfig

logger = logging.getLogger(__name__)

# Parents before children so the dump restores without FK errors.
BACKUP_TABLES = ("members", "events", "attendance")


def dump_command(config: DBConfig, tables: Sequence[str] = BACKUP_TABLES) -> list[str]:
    """mysqldump argv for a consistent snapshot of the attendance tables.

    The password is not on the command line; pass ``dump_env(config)``.
    """

    return [
        "mysqldump",
        f"--host={config.host}",
        f"--port={config.port}",
        f"--user={config.user}",
        "--single-transaction",
        "--no-create-db",
        config.database,
        *tables,
    ]


def dump_env(config: DBConfig) -> dict[str, str]:
    return {**os.environ, "MYSQL_PWD": config.password}


def backup_file(out_dir: Path, config: DBConfig, *, now: datetime) -> Path:
    return out_dir / f"{config.database}_attendance_{now:%Y%m%d_%H%M%S}.sql"


def run_backup(config: DBConfig, out_dir: Path, *, now: datetime) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = backup_file(out_dir, config, now=now)

    with out_file.open("wb") as f:
        subprocess.run(dump_command(config), stdout=f, stderr=subprocess.PIPE, env=dump_env(config), check=True)
    logger.info("backup written to %s", out_file)
    return out_file

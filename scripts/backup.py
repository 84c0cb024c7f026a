"""Dump the members, events and attendance tables to backups/.

Needs the MySQL client tools (`mysqldump`) on PATH.
"""

from __future__ import annotations

import importlib
import subprocess
from datetime import datetime
from pathlib import Path

from meeting_attendance.config import get_settings_module
from meeting_attendance.database.backup import run_backup
from meeting_attendance.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(settings.DB_CONFIG)
    out_dir = Path(__file__).resolve().parents[1] / "backups"

    try:
        out_file = run_backup(config, out_dir, now=datetime.now())
    except FileNotFoundError:
        raise SystemExit("mysqldump not found on PATH")
    except subprocess.CalledProcessError as e:
        raise SystemExit(f"mysqldump failed: {e.stderr.decode(errors='replace').strip()}")
    print(f"OK: {out_file}")


if __name__ == "__main__":
    main()

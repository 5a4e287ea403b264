"""Write the full attendance CSV to ./exports (same content as the download)."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "attendance_tracker"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from attendance_tracker.common.datetime_utils import now_local
from attendance_tracker.container import build_container, build_storage
from attendance_tracker.reports.export import export_filename


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage=build_storage(settings))

    out_dir = REPO_ROOT / "exports"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / export_filename(now_local().date())
    out_file.write_text(container.report_service.export_csv(), encoding="utf-8")
    print(f"OK: Report written: {out_file}")


if __name__ == "__main__":
    main()

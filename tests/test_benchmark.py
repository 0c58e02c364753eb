import logging
import time

import pytest

from access_launcher.collector import collect_desktop_entries
from access_launcher.config import LauncherConfig

logger = logging.getLogger(__name__)


@pytest.mark.slow
def test_scan_two_thousand_files_half_hidden(tmp_path) -> None:
    apps = tmp_path / "applications"
    apps.mkdir()
    for i in range(2000):
        hidden = "NoDisplay=true\n" if i % 2 else ""
        (apps / f"app-{i:04d}.desktop").write_text(
            "[Desktop Entry]\n"
            "Type=Application\n"
            f"Name=App {i:04d}\n"
            f"Exec=app-{i:04d}\n"
            "Categories=Utility;\n"
            f"{hidden}",
            encoding="utf-8",
        )

    start = time.perf_counter()
    entries = collect_desktop_entries(LauncherConfig(), [apps])
    elapsed = time.perf_counter() - start
    logger.info("Scanned 2000 desktop files in %.3fs", elapsed)

    assert len(entries) == 1000
    assert all(int(e.name.split()[1]) % 2 == 0 for e in entries)

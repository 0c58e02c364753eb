import textwrap

import pytest


@pytest.fixture
def write_desktop(tmp_path):
    """Write a desktop file below tmp_path and return its path."""

    def _write(relpath, body):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
        return path

    return _write

import os

from access_launcher import walker
from access_launcher.walker import discover_desktop_files, walk_desktop_files


def test_walks_recursively(tmp_path) -> None:
    root = tmp_path / "applications"
    (root / "kde4" / "nested").mkdir(parents=True)
    (root / "a.desktop").write_text("")
    (root / "readme.txt").write_text("")
    (root / "kde4" / "b.desktop").write_text("")
    (root / "kde4" / "nested" / "c.desktop").write_text("")
    (root / "folder.desktop").mkdir()

    names = sorted(p.name for p in walk_desktop_files(root))
    assert names == ["a.desktop", "b.desktop", "c.desktop"]


def test_walk_is_depth_first_in_listing_order(tmp_path, monkeypatch) -> None:
    root = tmp_path / "applications"
    (root / "m" / "deep").mkdir(parents=True)
    (root / "a.desktop").write_text("")
    (root / "m" / "inner.desktop").write_text("")
    (root / "m" / "deep" / "leaf.desktop").write_text("")
    (root / "m" / "n.desktop").write_text("")
    (root / "z.desktop").write_text("")

    list_dir = walker._list_dir
    monkeypatch.setattr(
        walker, "_list_dir", lambda path: sorted(list_dir(path), key=lambda e: e.name)
    )

    assert walk_desktop_files(root) == [
        root / "a.desktop",
        root / "m" / "deep" / "leaf.desktop",
        root / "m" / "inner.desktop",
        root / "m" / "n.desktop",
        root / "z.desktop",
    ]


def test_includes_symlinks_even_when_broken(tmp_path) -> None:
    root = tmp_path / "applications"
    root.mkdir()
    target = tmp_path / "real.desktop"
    target.write_text("")
    os.symlink(target, root / "linked.desktop")
    os.symlink(tmp_path / "gone.desktop", root / "broken.desktop")

    names = sorted(p.name for p in walk_desktop_files(root))
    assert names == ["broken.desktop", "linked.desktop"]


def test_missing_directories_are_skipped(tmp_path) -> None:
    assert walk_desktop_files(tmp_path / "does-not-exist") == []


def test_discover_keeps_directory_order(tmp_path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / "x.desktop").write_text("")
    (second / "x.desktop").write_text("")

    files = discover_desktop_files([second, tmp_path / "missing", first])
    assert files == [second / "x.desktop", first / "x.desktop"]

import sys
from pathlib import Path

from quicklaunch.discovery import (
    ShortcutDirectory,
    desktop_entry_name,
    is_noise,
    scan_shortcut_dirs,
    walk_files,
)


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _desktop(path: Path, name: str, extra: str = "") -> Path:
    return _touch(path, f"[Desktop Entry]\nType=Application\nName={name}\nExec=true\n{extra}")


def test_scan_lnk_folders(tmp_path):
    programs = tmp_path / "Programs"
    desktop = tmp_path / "Desktop"
    _touch(programs / "Zoom.lnk")
    _touch(programs / "Tools" / "Notepad++.lnk")
    _touch(programs / "Tools" / "Uninstall Notepad++.lnk")
    _touch(programs / "readme.txt")
    _touch(desktop / "Zoom.lnk")
    _touch(desktop / "Blender.lnk")

    apps = scan_shortcut_dirs([programs, desktop, tmp_path / "missing"])

    assert [a.name for a in apps] == ["Blender", "Notepad++", "Zoom"]
    zoom = next(a for a in apps if a.name == "Zoom")
    assert zoom.category == "Programs"
    assert zoom.path == str(programs / "Zoom.lnk")


def test_walk_files_respects_depth(tmp_path):
    _touch(tmp_path / "a" / "b" / "c" / "deep.lnk")
    _touch(tmp_path / "top.LNK")
    assert [p.name for p in walk_files(tmp_path, ".lnk", max_depth=1)] == ["top.LNK"]
    assert sorted(p.name for p in walk_files(tmp_path, ".lnk")) == ["deep.lnk", "top.LNK"]


def test_is_noise():
    assert is_noise("Uninstall Foo")
    assert is_noise("Foo ReadMe")
    assert not is_noise("Firefox")


def test_desktop_entry_name(tmp_path):
    assert desktop_entry_name(_desktop(tmp_path / "gimp.desktop", "GIMP")) == "GIMP"
    assert desktop_entry_name(_desktop(tmp_path / "x.desktop", "X", "NoDisplay=true\n")) is None
    assert desktop_entry_name(_touch(tmp_path / "link.desktop", "[Desktop Entry]\nType=Link\nName=L\n")) is None
    assert desktop_entry_name(_touch(tmp_path / "junk.desktop", "no sections here")) is None
    assert desktop_entry_name(_touch(tmp_path / "anon.desktop", "[Desktop Entry]\nType=Application\n")) == "anon"


def test_scan_desktop_entries(tmp_path):
    apps_dir = tmp_path / "applications"
    _desktop(apps_dir / "org.gimp.desktop", "GIMP")
    _desktop(apps_dir / "hidden.desktop", "Hidden", "Hidden=true\n")
    apps = scan_shortcut_dirs([apps_dir], ".desktop")
    assert [(a.name, a.category) for a in apps] == [("GIMP", "applications")]


def test_shortcut_directory_uses_given_folders(tmp_path):
    suffix = ".lnk" if sys.platform.startswith("win") else ".desktop"
    if suffix == ".lnk":
        _touch(tmp_path / "Programs" / "Paint.lnk")
    else:
        _desktop(tmp_path / "Programs" / "paint.desktop", "Paint")
    provider = ShortcutDirectory(dirs=[tmp_path / "Programs"])
    assert [a.name for a in provider.list_applications()] == ["Paint"]


def test_walk_files_stops_at_five_levels(tmp_path):
    _touch(tmp_path / "a" / "b" / "c" / "d" / "level5.lnk")
    _touch(tmp_path / "a" / "b" / "c" / "d" / "e" / "level6.lnk")
    assert [p.name for p in walk_files(tmp_path, ".lnk")] == ["level5.lnk"]

from pathlib import Path

from access_launcher.config import LauncherConfig


def test_from_environ_reads_every_input() -> None:
    config = LauncherConfig.from_environ({
        "HOME": "/home/alice",
        "XDG_DATA_HOME": "/data/home",
        "XDG_DATA_DIRS": "/opt/share::/usr/share",
        "USER": "alice",
        "NIX_PROFILES": "/nix/var/nix/profiles/default  /home/alice/.nix-profile",
        "LANG": "de_DE.UTF-8",
        "XDG_CURRENT_DESKTOP": "ubuntu:GNOME",
    })
    assert config.home == Path("/home/alice")
    assert config.data_home == Path("/data/home")
    assert config.data_dirs == ("/opt/share", "/usr/share")
    assert config.user == "alice"
    assert config.nix_profiles == ("/nix/var/nix/profiles/default", "/home/alice/.nix-profile")
    assert config.lang == "de_DE.UTF-8"
    assert config.current_desktops == ("ubuntu", "GNOME")


def test_from_environ_defaults() -> None:
    config = LauncherConfig.from_environ({"XDG_DATA_HOME": "", "XDG_CURRENT_DESKTOP": ""})
    assert config.home is None
    assert config.data_home is None
    assert config.data_dirs == ()
    assert config.user is None
    assert config.lang is None
    assert config.current_desktops is None


def test_lang_precedence() -> None:
    config = LauncherConfig.from_environ({"LANG": "en_US.UTF-8", "LC_ALL": "fr_FR.UTF-8"})
    assert config.lang == "fr_FR.UTF-8"
    config = LauncherConfig.from_environ({"LANG": "en_US.UTF-8", "LOGNAME": "bob"})
    assert config.lang == "en_US.UTF-8"
    assert config.user == "bob"

from pathlib import Path

import pytest

from fuelup.target_triple import TargetTriple
from fuelup.toolchain import Toolchain


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_from_path_layout(home):
    toolchain = Toolchain.from_path("my-toolchain")
    expected = home / ".fuelup" / "toolchains" / "my-toolchain"
    assert toolchain.name == "my-toolchain"
    assert toolchain.path == expected
    assert toolchain.bin_path == expected / "bin"


def test_new_appends_host_target(home):
    toolchain = Toolchain.new("latest")
    assert toolchain.name == f"latest-{TargetTriple.from_host()}"
    assert toolchain.path.name == toolchain.name


def test_all_without_toolchains_dir(home):
    assert Toolchain.all() == []


def test_all_lists_only_directories(home):
    root = home / ".fuelup" / "toolchains"
    (root / "latest-x86_64-unknown-linux-gnu").mkdir(parents=True)
    (root / "my-toolchain").mkdir()
    (root / "stray-file").write_text("x")
    assert Toolchain.all() == ["latest-x86_64-unknown-linux-gnu", "my-toolchain"]


def test_exists(home):
    toolchain = Toolchain.from_path("my-toolchain")
    assert not toolchain.exists()
    toolchain.bin_path.mkdir(parents=True)
    assert toolchain.exists()


def test_exists_false_for_file(home):
    toolchain = Toolchain.from_path("my-toolchain")
    toolchain.path.parent.mkdir(parents=True)
    toolchain.path.write_text("not a dir")
    assert not toolchain.exists()


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("latest-x86_64-apple-darwin", True),
        ("nightly-2022-08-30-aarch64-unknown-linux-gnu", True),
        ("testnet", True),
        ("mainnet-x86_64-unknown-linux-gnu", True),
        ("stable", True),
        ("ignition-x86_64-apple-darwin", True),
        ("my-toolchain", False),
        ("my_toolchain", False),
    ],
)
def test_is_distributed(home, name, expected):
    assert Toolchain.from_path(name).is_distributed() is expected


def test_from_settings_without_file(home):
    with pytest.raises(LookupError, match="No default toolchain detected"):
        Toolchain.from_settings()
    assert not (home / ".fuelup" / "settings.toml").exists()


def test_from_settings_reads_default(home):
    settings = home / ".fuelup" / "settings.toml"
    settings.parent.mkdir(parents=True)
    settings.write_text('default_toolchain = "latest-x86_64-apple-darwin"')
    toolchain = Toolchain.from_settings()
    assert toolchain.name == "latest-x86_64-apple-darwin"
    assert toolchain.bin_path == Path(
        home, ".fuelup", "toolchains", "latest-x86_64-apple-darwin", "bin"
    )


def test_from_settings_without_default(home):
    settings = home / ".fuelup" / "settings.toml"
    settings.parent.mkdir(parents=True)
    settings.write_text("")
    with pytest.raises(LookupError, match="Please install or create a toolchain first"):
        Toolchain.from_settings()
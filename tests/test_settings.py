import pytest

from fuelup.settings import Settings, SettingsFile


def test_parse_settings():
    settings = Settings.parse('default_toolchain = "latest-x86_64-apple-darwin"\n')
    assert settings.default_toolchain == "latest-x86_64-apple-darwin"


def test_write_settings(tmp_path):
    settings_path = tmp_path / "settings-example-dst.toml"
    settings_file = SettingsFile(settings_path)
    with settings_file.edit() as s:
        s.default_toolchain = "new-default-toolchain"
    settings = Settings.parse(settings_path.read_text())
    assert settings.default_toolchain == "new-default-toolchain"


def test_settings_into_string():
    settings = Settings(default_toolchain="yet-another-default-toolchain")
    assert settings.dumps() == 'default_toolchain = "yet-another-default-toolchain"\n'


def test_empty_settings_dump_to_empty_string():
    assert Settings().dumps() == ""
    assert Settings.parse("").default_toolchain is None


def test_round_trip():
    original = Settings(default_toolchain="nightly-2022-08-30-x86_64-unknown-linux-gnu")
    assert Settings.parse(original.dumps()) == original


def test_parse_wrong_type():
    with pytest.raises(ValueError):
        Settings.parse("default_toolchain = 3\n")


def test_read_creates_missing_file(tmp_path):
    path = tmp_path / "nested" / "settings.toml"
    settings = SettingsFile(path).read()
    assert settings.default_toolchain is None
    assert path.is_file()


def test_read_existing_file(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text('default_toolchain = "my-toolchain"')
    assert SettingsFile(path).read().default_toolchain == "my-toolchain"


def test_read_returns_copy(tmp_path):
    settings_file = SettingsFile(tmp_path / "settings.toml")
    copy = settings_file.read()
    copy.default_toolchain = "changed"
    assert settings_file.read().default_toolchain is None


def test_edit_not_saved_on_error(tmp_path):
    path = tmp_path / "settings.toml"
    settings_file = SettingsFile(path)
    with pytest.raises(RuntimeError):
        with settings_file.edit() as s:
            s.default_toolchain = "abandoned"
            raise RuntimeError("stop")
    assert settings_file.read().default_toolchain is None
    assert Settings.parse(path.read_text()).default_toolchain is None
import json

from pokearena.system.settings import Settings, SettingsData


def test_defaults(settings):
    d = settings.data
    assert d.transport == "stdio"
    assert d.effectiveness_cap == 2.0 and d.halve_damage is True
    policy = settings.damage_policy()
    assert policy.effectiveness_cap == 2.0 and policy.halve_damage


def test_save_and_reload(tmp_path):
    path = tmp_path / "s.json"
    s = Settings(SettingsData(port=8080, halve_damage=False, effectiveness_cap=None), path)
    s.save()
    again = Settings.load(path=path, env={})
    assert again.data.port == 8080
    assert again.damage_policy().effectiveness_cap is None
    assert again.damage_policy().halve_damage is False


def test_unknown_and_bad_fields_are_normalized(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"transport": "carrier-pigeon", "log_level": "loud", "port": "x", "legacy": 1}))
    s = Settings.load(path=path, env={})
    assert s.data.transport == "stdio"
    assert s.data.log_level == "INFO"
    assert s.data.port == 3000


def test_corrupt_file_falls_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("{not json")
    s = Settings.load(path=path, env={})
    assert s.data == SettingsData()


def test_env_overrides(tmp_path):
    s = Settings.load(path=tmp_path / "none.json",
                      env={"POKEARENA_TRANSPORT": "HTTP", "PORT": "9001", "POKEARENA_LOG_LEVEL": "debug"})
    assert s.data.transport == "http"
    assert s.data.port == 9001
    assert s.data.log_level == "DEBUG"


def test_info_is_quiet_without_debug(settings):
    assert settings.effective_log_level() == "WARN"
    settings.data.debug = True
    assert settings.effective_log_level() == "INFO"


def test_both_transports_setting(tmp_path):
    s = Settings.load(path=tmp_path / "none.json", env={"POKEARENA_TRANSPORT": "both"})
    assert s.data.transport == "both"

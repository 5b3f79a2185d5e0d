from __future__ import annotations

from typer.testing import CliRunner

from qrng_cli import config, main


def _use_tmp_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_settings_set_then_get(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    runner = CliRunner()

    result = runner.invoke(main.app, ["settings", "set", "--mode", "api-key", "--api-key", "abc", "--timeout", "3"])
    assert result.exit_code == 0

    result = runner.invoke(main.app, ["settings", "get", "mode"])
    assert result.exit_code == 0
    assert result.output.strip() == "api_key"

    result = runner.invoke(main.app, ["settings", "show"])
    assert "api_key=(set)" in result.output
    assert "abc" not in result.output


def test_settings_set_rejects_unknown_mode(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    result = CliRunner().invoke(main.app, ["settings", "set", "--mode", "pseudo"])
    assert result.exit_code == 2


def test_settings_get_unknown_key(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    result = CliRunner().invoke(main.app, ["settings", "get", "color"])
    assert result.exit_code == 2
    assert "Unknown setting" in result.output


def test_settings_init_does_not_overwrite(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    runner = CliRunner()
    first = runner.invoke(main.app, ["settings", "init", "--api-key", ""])
    assert first.exit_code == 0
    second = runner.invoke(main.app, ["settings", "init", "--api-key", "x"])
    assert second.exit_code == 0
    assert "already exists" in second.output


def test_settings_get_api_key_masks_value(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    runner = CliRunner()

    result = runner.invoke(main.app, ["settings", "get", "api_key"])
    assert result.exit_code == 0
    assert result.output.strip() == "(empty)"

    runner.invoke(main.app, ["settings", "set", "--api-key", "hidden-key"])
    result = runner.invoke(main.app, ["settings", "get", "api_key"])
    assert result.exit_code == 0
    assert result.output.strip() == "(set)"
    assert "hidden-key" not in result.output

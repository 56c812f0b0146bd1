"""Tests for HelloSettings: port parsing and source isolation."""

import pytest

from hellosrv.config.models import DEFAULT_PORT
from hellosrv.config.settings import HelloSettings
from hellosrv.errors import ConfigurationError


class TestDefaults:
    def test_default_port(self) -> None:
        settings = HelloSettings.from_cli()
        assert settings.port == DEFAULT_PORT == 10005
        assert settings.verbose is False
        assert settings.log_json is False

    def test_none_means_default(self) -> None:
        assert HelloSettings.from_cli(port=None).port == 10005

    def test_frozen(self) -> None:
        settings = HelloSettings.from_cli()
        with pytest.raises(Exception):
            settings.port = 1  # type: ignore[misc]


class TestPortParsing:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", 1), ("80", 80), ("10005", 10005), ("65535", 65535), (" 8080 ", 8080), (443, 443)],
    )
    def test_valid(self, raw: str | int, expected: int) -> None:
        assert HelloSettings.from_cli(port=raw).port == expected

    @pytest.mark.parametrize("raw", ["abc", "", "80.5", "1_000", "0x50", "８０", "8o"])
    def test_not_an_integer(self, raw: str) -> None:
        with pytest.raises(ConfigurationError, match="port must be an integer") as exc_info:
            HelloSettings.from_cli(port=raw)
        assert exc_info.value.value == raw

    @pytest.mark.parametrize("raw", ["0", "-1", "65536", "100000", 0, 70000])
    def test_out_of_range(self, raw: str | int) -> None:
        with pytest.raises(ConfigurationError, match=r"invalid port"):
            HelloSettings.from_cli(port=raw)

    def test_message_names_the_value(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            HelloSettings.from_cli(port="65536")
        assert "'65536'" in exc_info.value.message
        assert "65535" in exc_info.value.message

    def test_configuration_error_exit_code(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            HelloSettings.from_cli(port="nope")
        assert exc_info.value.exit_code == 1


class TestSourceIsolation:
    def test_environment_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "1234")
        monkeypatch.setenv("HELLOSRV_PORT", "4321")
        monkeypatch.setenv("VERBOSE", "true")
        settings = HelloSettings.from_cli()
        assert settings.port == 10005
        assert settings.verbose is False

    def test_dotenv_is_ignored(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("PORT=2222\n")
        monkeypatch.chdir(tmp_path)
        assert HelloSettings.from_cli().port == 10005

    def test_cli_flags_pass_through(self) -> None:
        settings = HelloSettings.from_cli(port="8080", verbose=True, log_json=True)
        assert settings.port == 8080
        assert settings.verbose is True
        assert settings.log_json is True

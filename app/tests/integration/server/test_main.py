"""Integration tests for the main entry point."""

from unittest.mock import patch

import pytest

import main
from infrastructure.configuration import loading


@pytest.fixture(autouse=True)
def no_default_config_file(tmp_path, monkeypatch):
    monkeypatch.setattr(loading, "DEFAULT_CONFIG_PATH", tmp_path / "absent.toml")


@pytest.mark.integration
class TestMain:
    """Tests for main()."""

    def test_parse_args(self):
        """--config is optional."""
        assert main.parse_args([]).config_location is None
        assert main.parse_args(["--config", "/tmp/c.toml"]).config_location == "/tmp/c.toml"

    def test_missing_config_file_exits(self, tmp_path):
        """An unreadable explicit config file stops startup."""
        with patch.object(main.uvicorn, "run") as mock_run:
            assert main.main(["--config", str(tmp_path / "missing.toml")]) == 1
        mock_run.assert_not_called()

    def test_missing_default_locale_exits(self, tmp_path):
        """A locales directory without en-US stops startup."""
        (tmp_path / "locales" / "fr").mkdir(parents=True)
        config = tmp_path / "config.toml"
        config.write_text(
            f'[i18n]\nlocales_dir = "{(tmp_path / "locales").as_posix()}"\n',
            encoding="utf-8",
        )

        with patch.object(main.uvicorn, "run") as mock_run:
            assert main.main(["--config", str(config)]) == 1
        mock_run.assert_not_called()

    def test_serves_on_listen_address(self, tmp_path, locales_dir):
        """main() serves the app on the configured address."""
        config = tmp_path / "config.toml"
        config.write_text(
            'local_socket_addr = "0.0.0.0:9000"\n'
            f'[i18n]\nlocales_dir = "{locales_dir.as_posix()}"\n',
            encoding="utf-8",
        )

        with patch.object(main.uvicorn, "run") as mock_run:
            assert main.main(["--config", str(config)]) == 0

        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs == {"host": "0.0.0.0", "port": 9000}

    def test_malformed_default_config_exits(self, tmp_path, monkeypatch):
        """An invalid default config file is reported by main(), not at import."""
        bad = tmp_path / "bad.toml"
        bad.write_text("servername = = 1\n", encoding="utf-8")
        monkeypatch.setattr(loading, "DEFAULT_CONFIG_PATH", bad)

        with patch.object(main.uvicorn, "run") as mock_run:
            assert main.main([]) == 1
        mock_run.assert_not_called()

    def test_explicit_config_skips_malformed_default(
        self, tmp_path, monkeypatch, locales_dir
    ):
        """--config is used without reading the default config file."""
        bad = tmp_path / "bad.toml"
        bad.write_text("servername = = 1\n", encoding="utf-8")
        monkeypatch.setattr(loading, "DEFAULT_CONFIG_PATH", bad)
        config = tmp_path / "config.toml"
        config.write_text(
            f'[i18n]\nlocales_dir = "{locales_dir.as_posix()}"\n', encoding="utf-8"
        )

        with patch.object(main.uvicorn, "run") as mock_run:
            assert main.main(["--config", str(config)]) == 0
        mock_run.assert_called_once()

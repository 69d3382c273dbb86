import pytest

from pokescroll.config import PokescrollConfig, load_config, merge_config_with_cli_args, save_config
from pokescroll.exceptions import ConfigError


class TestPokescrollConfig:
    def test_defaults(self):
        config = PokescrollConfig()

        assert config.api_base_url == "http://127.0.0.1:8000"
        assert config.page_size == 20
        assert config.stop_on_empty_page is True
        assert config.carousel_reset_on_navigate is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"theme": "Github Dark"},
            {"page_size": 0},
            {"api_base_url": "ftp://example.com"},
            {"carousel_interval": 0},
            {"scroll_margin": -1},
            {"log_level": "chatty"},
        ],
    )
    def test_invalid_values_raise(self, overrides):
        with pytest.raises(ConfigError):
            PokescrollConfig(**overrides)

    def test_log_level_is_normalised(self):
        assert PokescrollConfig(log_level="debug").log_level == "DEBUG"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "absent.config")) == PokescrollConfig()

    def test_reads_known_keys_and_ignores_others(self, tmp_path):
        path = tmp_path / "pokescroll.config"
        path.write_text('api_base_url = "http://proxy.test:9000"\npage_size = 50\nfavourite = "mew"\n')

        config = load_config(str(path))

        assert config.api_base_url == "http://proxy.test:9000"
        assert config.page_size == 50

    def test_malformed_file_raises(self, tmp_path):
        path = tmp_path / "pokescroll.config"
        path.write_text("page_size = = 3")

        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "pokescroll.config"
        save_config({"theme": "nord", "scroll_margin": 2}, path)

        config = load_config(str(path))

        assert config.theme == "nord"
        assert config.scroll_margin == 2


class TestMergeConfig:
    def test_cli_args_win_when_given(self):
        base = PokescrollConfig(page_size=50, theme="nord")

        merged = merge_config_with_cli_args(base, page_size=10, theme=None, api_base_url=None)

        assert merged.page_size == 10
        assert merged.theme == "nord"
        assert merged.api_base_url == base.api_base_url

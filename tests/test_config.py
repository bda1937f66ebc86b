"""Tests for configuration system."""

from __future__ import annotations

import textwrap

import pytest

from complex_reactor.exceptions import ConfigurationError
from complex_reactor.utils.config import (
    AppConfig,
    LoggingConfig,
    ReactorConfig,
    expand_env_vars,
    load_config,
    merge_configs,
    read_config_data,
    save_config,
)

# ── helpers ──────────────────────────────────────────────────────────


def _sample_config() -> AppConfig:
    return AppConfig(
        reactor=ReactorConfig(
            conversion=0.8,
            two_outputs=True,
            split_ratio=0.6,
            input_a=2.0,
            input_b=3.0,
        ),
        logging=LoggingConfig(level="DEBUG", format="json"),
    )


def _write_yaml(tmp_path, content: str) -> str:
    p = tmp_path / "config.yaml"
    p.write_text(textwrap.dedent(content))
    return str(p)


# ── Pydantic models ─────────────────────────────────────────────────


class TestPydanticModels:
    def test_reactor_config_defaults(self):
        cfg = ReactorConfig()
        assert cfg.conversion == 0.5
        assert cfg.two_outputs is False
        assert cfg.split_ratio == 0.5
        assert cfg.input_a == 0.0

    @pytest.mark.parametrize(
        "field, value",
        [("conversion", 1.5), ("conversion", -0.1), ("split_ratio", 2.0), ("input_a", -1.0)],
    )
    def test_reactor_config_bounds(self, field, value):
        with pytest.raises(ValueError):
            ReactorConfig(**{field: value})

    def test_logging_config_rejects_unknown_format(self):
        with pytest.raises(ValueError):
            LoggingConfig(format="xml")

    def test_logging_config(self):
        cfg = LoggingConfig()
        assert cfg.level == "INFO"
        assert cfg.format == "text"
        assert cfg.log_file is None

    def test_app_config_defaults(self):
        cfg = AppConfig()
        assert cfg.reactor == ReactorConfig()
        assert cfg.logging == LoggingConfig()


# ── save_config / load_config ────────────────────────────────────────


class TestSaveLoadConfig:
    def test_save_and_load(self, tmp_path):
        cfg = _sample_config()
        path = tmp_path / "reactor.yaml"
        save_config(cfg, path)
        assert load_config(path) == cfg

    def test_save_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "sub" / "dir" / "reactor.yaml"
        save_config(_sample_config(), path)
        assert path.exists()

    def test_load_missing_file_raises(self):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config("/nonexistent/path/reactor.yaml")

    def test_load_invalid_yaml_raises(self, tmp_path):
        path = _write_yaml(tmp_path, "{{invalid yaml: [")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_load_out_of_range_raises(self, tmp_path):
        path = _write_yaml(tmp_path, """
            reactor:
              conversion: 1.5
        """)
        with pytest.raises(ConfigurationError, match="Invalid config"):
            load_config(path)

    def test_load_non_mapping_raises(self, tmp_path):
        path = _write_yaml(tmp_path, "- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="Invalid config"):
            load_config(path)

    def test_load_empty_file_gives_defaults(self, tmp_path):
        path = _write_yaml(tmp_path, "")
        assert load_config(path) == AppConfig()

    def test_partial_reactor_section(self, tmp_path):
        path = _write_yaml(tmp_path, """
            reactor:
              two_outputs: true
        """)
        cfg = load_config(path)
        assert cfg.reactor.two_outputs is True
        assert cfg.reactor.conversion == 0.5


# ── Environment variable interpolation ───────────────────────────────


class TestEnvInterpolation:
    def test_expand_unset_without_default_left_as_is(self, monkeypatch):
        monkeypatch.delenv("CR_UNSET", raising=False)
        assert expand_env_vars("a: ${CR_UNSET}") == "a: ${CR_UNSET}"

    def test_expand_empty_default(self, monkeypatch):
        monkeypatch.delenv("CR_UNSET", raising=False)
        assert expand_env_vars("a: ${CR_UNSET:}") == "a: "

    def test_read_config_data_returns_mapping(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CR_SPLIT", "0.4")
        path = _write_yaml(tmp_path, """
            reactor:
              split_ratio: ${CR_SPLIT}
        """)
        assert read_config_data(path) == {"reactor": {"split_ratio": 0.4}}

    def test_read_config_data_directory_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            read_config_data(tmp_path)

    def test_env_var_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CR_CONVERSION", "0.9")
        path = _write_yaml(tmp_path, """
            reactor:
              conversion: ${CR_CONVERSION}
        """)
        assert load_config(path).reactor.conversion == 0.9

    def test_env_var_with_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CR_MISSING_VAR", raising=False)
        path = _write_yaml(tmp_path, """
            reactor:
              split_ratio: ${CR_MISSING_VAR:0.3}
        """)
        assert load_config(path).reactor.split_ratio == 0.3

    def test_env_var_override_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CR_INPUT_A", "7.5")
        path = _write_yaml(tmp_path, """
            reactor:
              input_a: ${CR_INPUT_A:1.0}
        """)
        assert load_config(path).reactor.input_a == 7.5


# ── merge_configs ────────────────────────────────────────────────────


class TestMergeConfigs:
    def test_simple_merge(self):
        assert merge_configs({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_deep_merge(self):
        base = {"reactor": {"conversion": 0.5, "split_ratio": 0.5}, "x": 3}
        override = {"reactor": {"split_ratio": 0.9}}
        result = merge_configs(base, override)
        assert result == {"reactor": {"conversion": 0.5, "split_ratio": 0.9}, "x": 3}

    def test_override_replaces_non_dict(self):
        assert merge_configs({"a": [1, 2, 3]}, {"a": [4]}) == {"a": [4]}

    def test_base_unchanged(self):
        base = {"a": {"x": 1}}
        merge_configs(base, {"a": {"y": 2}})
        assert "y" not in base["a"]

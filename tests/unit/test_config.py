"""Unit tests for tagset configuration."""

from pathlib import Path

import pytest

from tagset.core.config import DEFAULT_CONFIG, TagSetConfig, load_config


class TestTagSetConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.tag_string_min == 1
        assert DEFAULT_CONFIG.tag_string_max == 3000
        assert DEFAULT_CONFIG.strict_length_check is False
        assert DEFAULT_CONFIG.is_letter("é")
        assert DEFAULT_CONFIG.is_digit("7")

    def test_negative_bounds_rejected(self) -> None:
        with pytest.raises(ValueError, match="tag_string_min"):
            TagSetConfig(tag_string_min=-1)
        with pytest.raises(ValueError, match="tag_string_max"):
            TagSetConfig(tag_string_max=-1)

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("tag_string_min", "abc"),
            ("tag_string_max", 1.5),
            ("tag_string_max", True),
            ("strict_length_check", "no"),
            ("strict_length_check", 1),
        ],
    )
    def test_wrong_type_rejected(self, field: str, value: object) -> None:
        with pytest.raises(ValueError, match=field):
            TagSetConfig(**{field: value})


class TestLoadConfig:
    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """有効なYAMLファイルから設定を読み込めること."""
        config_file = tmp_path / "tagset.yml"
        config_file.write_text(
            "tagset:\n  tag_string_min: 2\n  tag_string_max: 100\n  strict_length_check: true\n",
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.tag_string_min == 2
        assert config.tag_string_max == 100
        assert config.strict_length_check is True

    def test_partial_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tagset.yml"
        config_file.write_text("tagset:\n  tag_string_max: 50\n", encoding="utf-8")

        config = load_config(str(config_file))

        assert config.tag_string_min == 1
        assert config.tag_string_max == 50

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tagset.yml"
        config_file.write_text("", encoding="utf-8")

        assert load_config(config_file) == TagSetConfig()

    def test_load_nonexistent_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "missing.yml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tagset.yml"
        config_file.write_text("tagset: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(config_file)

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tagset.yml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a YAML mapping"):
            load_config(config_file)

    def test_unknown_key(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tagset.yml"
        config_file.write_text("tagset:\n  max_tags: 10\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Unknown config keys"):
            load_config(config_file)

    @pytest.mark.parametrize(
        "body",
        ["tagset:\n  tag_string_min: abc\n", "tagset:\n  strict_length_check: \"no\"\n"],
    )
    def test_wrong_value_type(self, tmp_path: Path, body: str) -> None:
        """値の型が不正な場合に ValueError が発生すること."""
        config_file = tmp_path / "tagset.yml"
        config_file.write_text(body, encoding="utf-8")

        with pytest.raises(ValueError, match="must be a"):
            load_config(config_file)

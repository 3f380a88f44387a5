"""タグ集合の検証設定.

タグリスト文字列の長さ制限や文字種判定を、グローバル変数ではなく
明示的な設定オブジェクトとして扱います。

使用例:
    >>> config = load_config(Path("tagset.yml"))
    >>> tags = TagSet.from_string("tag1, tag2", config=config)

YAML形式:
    tagset:
      tag_string_min: 1
      tag_string_max: 3000
      strict_length_check: false
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import yaml
from loguru import logger

_CONFIG_KEYS = ("tag_string_min", "tag_string_max", "strict_length_check")


@dataclass(frozen=True)
class TagSetConfig:
    """タグ集合の検証設定.

    Attributes:
        tag_string_min: タグリスト文字列の最小長（UTF-8 バイト数）
        tag_string_max: タグリスト文字列の最大長（UTF-8 バイト数、この値は範囲に含まない）
        strict_length_check: True の場合、長さ検査を通常の範囲チェックとして行う。
            False（既定）の場合は互換のため
            ``len <= tag_string_min and len >= tag_string_max`` のときのみ拒否する
        is_letter: 1文字が「文字（letter）」かを判定する述語
        is_digit: 1文字が数字かを判定する述語
    """

    tag_string_min: int = 1
    tag_string_max: int = 3000
    strict_length_check: bool = False
    is_letter: Callable[[str], bool] = str.isalpha
    is_digit: Callable[[str], bool] = str.isdecimal

    def __post_init__(self) -> None:
        """設定値の妥当性を検証.

        Raises:
            ValueError: 型が不正、または長さ制限が負の場合
        """
        for name in ("tag_string_min", "tag_string_max"):
            value = getattr(self, name)
            # bool は int のサブクラスなので明示的に除外
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{name} must be an int, got {type(value).__name__} ({value!r})"
                raise ValueError(msg)
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise ValueError(msg)

        if not isinstance(self.strict_length_check, bool):
            msg = (
                "strict_length_check must be a bool, "
                f"got {type(self.strict_length_check).__name__} ({self.strict_length_check!r})"
            )
            raise ValueError(msg)


DEFAULT_CONFIG = TagSetConfig()


def load_config(config_path: Path | str) -> TagSetConfig:
    """YAMLファイルから設定を読み込む.

    Args:
        config_path: 設定YAMLファイルのパス

    Returns:
        設定オブジェクト（未指定のキーは既定値）

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: YAML形式が不正、または未知のキーが含まれている場合
    """
    config_path = Path(config_path)

    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in config file: {config_path}"
        raise ValueError(msg) from e

    # 空ファイルは既定値
    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a YAML mapping, got {type(data)}"
        raise ValueError(msg)

    section = data.get("tagset", {}) or {}
    if not isinstance(section, dict):
        msg = f"'tagset' section must be a mapping, got {type(section)}"
        raise ValueError(msg)

    unknown = set(section) - set(_CONFIG_KEYS)
    if unknown:
        msg = f"Unknown config keys in {config_path}: {sorted(unknown)}. Valid keys: {list(_CONFIG_KEYS)}"
        raise ValueError(msg)

    config = TagSetConfig(**section)
    logger.info(
        f"Loaded tagset config from {config_path} "
        f"(min={config.tag_string_min}, max={config.tag_string_max}, "
        f"strict={config.strict_length_check})"
    )
    return config

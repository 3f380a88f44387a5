"""tagset: ソート済み・重複なしのタグ集合ライブラリ."""

from tagset.core import (
    DEFAULT_CONFIG,
    EmptyTagError,
    InvalidTagCharacterError,
    InvalidTagsLengthError,
    TagAlreadyExistsError,
    TagNotFoundError,
    TagSet,
    TagSetConfig,
    TagSetError,
    check_tag,
    check_tags,
    load_config,
)

__version__ = "0.1.0"

__all__ = [
    "TagSet",
    "TagSetConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "check_tag",
    "check_tags",
    "TagSetError",
    "EmptyTagError",
    "InvalidTagCharacterError",
    "TagAlreadyExistsError",
    "TagNotFoundError",
    "InvalidTagsLengthError",
]

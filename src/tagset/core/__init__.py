"""タグ集合のコア処理群.

- 検証（単一タグ / カンマ区切りタグリスト）
- タグ集合（ソート済み・重複なし）の構築、変更、比較、正規表記
- 設定（長さ制限・文字種判定）
"""

from .config import DEFAULT_CONFIG, TagSetConfig, load_config
from .exceptions import (
    EmptyTagError,
    InvalidTagCharacterError,
    InvalidTagsLengthError,
    TagAlreadyExistsError,
    TagNotFoundError,
    TagSetError,
)
from .tags import TagSet
from .validation import check_tag, check_tags

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

"""タグ文字列の検証.

単一タグ（check_tag）とカンマ区切りのタグリスト（check_tags）の
文字種・長さを検証する関数群です。

許可される文字:
    - 文字（設定の is_letter、既定は Unicode の L* カテゴリ）
    - 数字（設定の is_digit、既定は Unicode の Nd カテゴリ）
    - 空白と ``-`` ``_`` ``.`` ``/`` ``:``
    - タグリストの場合のみ ``,``
"""

from __future__ import annotations

from loguru import logger

from .config import DEFAULT_CONFIG, TagSetConfig
from .exceptions import InvalidTagCharacterError, InvalidTagsLengthError

TAG_PUNCTUATION = frozenset(" -_./:")
TAG_LIST_SEPARATOR = ","


def encoded_length(value: str) -> int:
    """UTF-8 でのバイト数を返す."""
    return len(value.encode("utf-8"))


def _check_characters(value: str, extra: frozenset[str], config: TagSetConfig) -> None:
    for ch in value:
        if config.is_letter(ch) or config.is_digit(ch) or ch in extra:
            continue
        logger.debug(f"Rejected {value!r}: invalid character {ch!r}")
        raise InvalidTagCharacterError(ch, value)


def check_tag(tag: str, config: TagSetConfig | None = None) -> None:
    """単一タグが許可された文字だけで構成されているか検証する.

    Args:
        tag: 検証するタグ（空白除去済みを想定）
        config: 検証設定（None の場合は既定値）

    Raises:
        InvalidTagCharacterError: 許可されていない文字が含まれている場合

    Examples:
        >>> check_tag("long hair")
        >>> check_tag("meta:highres")
    """
    _check_characters(tag, TAG_PUNCTUATION, config or DEFAULT_CONFIG)


def check_tags(tags: str, config: TagSetConfig | None = None) -> None:
    """カンマ区切りのタグリスト文字列を検証する.

    長さは UTF-8 のバイト数で数える。
    長さ検査は既定では ``len <= tag_string_min and len >= tag_string_max`` の
    場合のみ失敗する（min >= max の設定でしか発火しない互換動作）。
    ``strict_length_check`` が有効な場合は ``tag_string_min <= len < tag_string_max``
    の範囲外を拒否する。空文字列は空のタグ集合を表すため常に許可する。

    Args:
        tags: 検証するタグリスト文字列
        config: 検証設定（None の場合は既定値）

    Raises:
        InvalidTagsLengthError: 長さ検査に失敗した場合
        InvalidTagCharacterError: 許可されていない文字が含まれている場合
    """
    config = config or DEFAULT_CONFIG
    length = encoded_length(tags)

    if config.strict_length_check:
        rejected = tags != "" and not (config.tag_string_min <= length < config.tag_string_max)
    else:
        rejected = length <= config.tag_string_min and length >= config.tag_string_max

    if rejected:
        logger.debug(f"Rejected tag list of length {length}")
        raise InvalidTagsLengthError(length, config.tag_string_min, config.tag_string_max)

    _check_characters(tags, TAG_PUNCTUATION | {TAG_LIST_SEPARATOR}, config)

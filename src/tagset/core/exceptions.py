"""TagSet exceptions.

タグ集合の操作で発生するカスタム例外クラスを定義します。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tags import TagSet


class TagSetError(Exception):
    """タグ集合操作の基底例外.

    Attributes:
        partial: 一括構築中に失敗した場合、失敗直前までに構築されたタグ集合
    """

    def __init__(self, message: str) -> None:
        self.partial: TagSet | None = None
        super().__init__(message)


class EmptyTagError(TagSetError):
    """前後の空白を除去した結果、タグが空文字列になった場合の例外."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Empty tag: {tag!r}")


class InvalidTagCharacterError(TagSetError):
    """許可されていない文字がタグに含まれている場合の例外.

    Attributes:
        char: 最初に見つかった不正文字
        value: 検証対象の文字列（単一タグまたはカンマ区切りリスト）
    """

    def __init__(self, char: str, value: str) -> None:
        """例外初期化.

        Args:
            char: 不正文字
            value: 検証対象の文字列
        """
        self.char = char
        self.value = value
        super().__init__(f"Invalid tag character: the character {char!r} is invalid in {value!r}")


class TagAlreadyExistsError(TagSetError):
    """既に存在するタグを追加しようとした場合の例外."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Tag already exists: {tag!r}")


class TagNotFoundError(TagSetError):
    """存在しないタグを削除しようとした場合の例外."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Tag not found: {tag!r}")


class InvalidTagsLengthError(TagSetError):
    """タグリスト文字列の長さが設定範囲外の場合の例外.

    Attributes:
        length: 検査した文字列長
        minimum: 設定上の最小長（tag_string_min）
        maximum: 設定上の最大長（tag_string_max）
    """

    def __init__(self, length: int, minimum: int, maximum: int) -> None:
        self.length = length
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Invalid tags length: {length} (min={minimum}, max={maximum})")

"""ソート済み・重複なしのタグ集合（TagSet）.

タグを昇順ソートされたリストとして保持し、二分探索で挿入・削除・検索を行います。

設計方針:
    - 内部リストは常に昇順かつ重複なし（全操作でこの不変条件を維持する）
    - 挿入位置の探索は O(log n)、挿入/削除自体はリストのシフトで O(n)
    - 単一要素操作は失敗時に集合を変更しない
    - 一括操作（replace）は個別要素の失敗をスキップする（best-effort）
    - 正規表記は ``", "`` 区切り（例: ``"tag1, tag2, tag3"``）
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator

from loguru import logger

from .config import DEFAULT_CONFIG, TagSetConfig
from .exceptions import (
    EmptyTagError,
    InvalidTagsLengthError,
    TagAlreadyExistsError,
    TagNotFoundError,
    TagSetError,
)
from .validation import TAG_LIST_SEPARATOR, check_tag, check_tags, encoded_length

TAG_JOINER = ", "


class TagSet:
    """ソート済み・重複なしのタグ集合.

    Examples:
        >>> tags = TagSet.from_string("tag3, tag1, tag2")
        >>> tags.get()
        'tag1, tag2, tag3'
        >>> tags.add("tag0")
        >>> str(tags)
        'tag0, tag1, tag2, tag3'
    """

    def __init__(self, tags: Iterable[str] | None = None, config: TagSetConfig | None = None) -> None:
        """タグ集合を初期化.

        Args:
            tags: 初期タグ（未検証・未ソートで可。重複は無視される）
            config: 検証設定（None の場合は既定値）

        Raises:
            TypeError: tags に文字列そのものが渡された場合（from_string を使う）
            TagSetError: 初期タグに不正なものが含まれている場合
        """
        if isinstance(tags, str):
            msg = "TagSet() takes an iterable of tags; use TagSet.from_string for comma separated strings"
            raise TypeError(msg)
        self._config = config or DEFAULT_CONFIG
        self._tags: list[str] = []
        if tags is not None:
            self.merge_from_strings(tags)

    @classmethod
    def from_string(cls, tags: str, config: TagSetConfig | None = None) -> TagSet:
        """カンマ区切りのタグリスト文字列からタグ集合を作成する.

        先頭・末尾・連続したカンマや前後の空白は無視され、重複は1つにまとめられる。

        Args:
            tags: カンマ区切りのタグリスト（例: "tag3, tag1, tag2"）
            config: 検証設定

        Returns:
            作成したタグ集合（空文字列の場合は空集合）

        Raises:
            InvalidTagsLengthError: 文字列全体の長さ検査に失敗した場合
            InvalidTagCharacterError: 許可されていない文字が含まれている場合
            TagSetError: 個別タグの追加に失敗した場合（``partial`` に途中までの集合を保持）
        """
        check_tags(tags, config)
        tag_set = cls(config=config)
        for piece in tags.split(TAG_LIST_SEPARATOR):
            if not piece.strip():
                continue
            try:
                tag_set.add(piece)
            except TagAlreadyExistsError:
                continue
            except TagSetError as e:
                e.partial = tag_set
                raise
        return tag_set

    @property
    def config(self) -> TagSetConfig:
        return self._config

    def _search(self, tag: str) -> int:
        return bisect_left(self._tags, tag)

    def _index(self, tag: str) -> int | None:
        i = self._search(tag)
        if i < len(self._tags) and self._tags[i] == tag:
            return i
        return None

    def add(self, tag: str) -> None:
        """タグを1つ追加する.

        Args:
            tag: 追加するタグ（前後の空白は除去される）

        Raises:
            EmptyTagError: 空白除去後に空文字列になる場合
            InvalidTagCharacterError: 許可されていない文字が含まれている場合
            TagAlreadyExistsError: 既に同じタグが存在する場合
            InvalidTagsLengthError: strict_length_check 有効時、正規表記が最大長に達する場合
        """
        trimmed = tag.strip()
        if not trimmed:
            raise EmptyTagError(tag)
        check_tag(trimmed, self._config)

        i = self._search(trimmed)
        if i < len(self._tags) and self._tags[i] == trimmed:
            raise TagAlreadyExistsError(trimmed)

        if self._config.strict_length_check:
            # 挿入後の正規表記の UTF-8 バイト数（tag_string_max 未満であること）
            joiner = len(TAG_JOINER) if self._tags else 0
            rendered = encoded_length(self.get()) + encoded_length(trimmed) + joiner
            if rendered >= self._config.tag_string_max:
                raise InvalidTagsLengthError(
                    rendered, self._config.tag_string_min, self._config.tag_string_max
                )

        self._tags.insert(i, trimmed)

    def remove(self, tag: str) -> None:
        """タグを1つ削除する.

        Raises:
            TagNotFoundError: タグが存在しない場合
        """
        i = self._index(tag)
        if i is None:
            raise TagNotFoundError(tag)
        del self._tags[i]

    def exist(self, tag: str) -> bool:
        """タグが存在するか確認する."""
        return self._index(tag) is not None

    def get(self) -> str:
        """正規表記（", " 区切り）を返す. 空集合は空文字列."""
        return TAG_JOINER.join(self._tags)

    def copy(self) -> TagSet:
        """内部リストを共有しない複製を返す."""
        dst = type(self)(config=self._config)
        dst._tags = list(self._tags)
        return dst

    def replace(self, tags: str) -> None:
        """全タグをカンマ区切りのタグリスト文字列の内容で置き換える.

        文字列全体の検証に失敗した場合は集合を変更しない。
        個別タグの追加失敗（重複など）はスキップする。

        Args:
            tags: カンマ区切りのタグリスト

        Raises:
            InvalidTagsLengthError: 文字列全体の長さ検査に失敗した場合
            InvalidTagCharacterError: 許可されていない文字が含まれている場合
        """
        check_tags(tags, self._config)
        self._tags = []
        for piece in tags.split(TAG_LIST_SEPARATOR):
            if not piece.strip():
                continue
            try:
                self.add(piece)
            except TagSetError as e:
                logger.debug(f"Skipped tag {piece.strip()!r} on replace: {e}")

    def merge(self, other: TagSet) -> None:
        """別のタグ集合をマージする. 両方に存在するタグはエラーにしない.

        Raises:
            TagSetError: 重複以外の理由で追加に失敗した場合
        """
        self.merge_from_strings(other._tags)

    def merge_from_strings(self, items: Iterable[str]) -> None:
        """未検証・未ソートの文字列群をマージする.

        各要素は add と同じ検証を受ける。既存タグとの重複はエラーにしない。

        Args:
            items: 追加するタグ文字列の列

        Raises:
            TagSetError: 重複以外の理由で追加に失敗した場合（それまでの追加は維持される）
        """
        for item in items:
            try:
                self.add(item)
            except TagAlreadyExistsError:
                continue

    def compare(self, other: TagSet) -> int:
        """self のタグのうち other にも存在するものの数を返す（非対称）."""
        return sum(1 for tag in self._tags if other.exist(tag))

    def same(self, other: TagSet) -> bool:
        """両集合の要素が順序も含めて一致するか判定する."""
        if len(self._tags) != len(other._tags):
            return False
        return all(a == b for a, b in zip(self._tags, other._tags))

    # ソートアルゴリズム向けの順序プリミティブ
    def less(self, i: int, j: int) -> bool:
        return self._tags[i] < self._tags[j]

    def swap(self, i: int, j: int) -> None:
        self._tags[i], self._tags[j] = self._tags[j], self._tags[i]

    def to_list(self) -> list[str]:
        return list(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tags))

    def __getitem__(self, index: int) -> str:
        return self._tags[index]

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and self.exist(tag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return self.same(other)

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> TagSet:
        return self.copy()

    def __str__(self) -> str:
        return self.get()

    def __repr__(self) -> str:
        return f"TagSet({self.get()!r})"

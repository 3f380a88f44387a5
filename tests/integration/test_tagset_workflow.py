"""Integration tests for tagset workflows.

This module tests:
- Config loading and strict validation across TagSet operations
- CSV canonicalization through the command line entry point
"""

import sys
from pathlib import Path

import polars as pl
import pytest

from tagset.core.config import load_config
from tagset.core.exceptions import InvalidTagsLengthError
from tagset.core.tags import TagSet
from tagset.tools import canonicalize_tags


@pytest.mark.integration
class TestTagSetWorkflow:
    """TagSet ワークフロー統合テスト."""

    def test_build_merge_render_roundtrip(self) -> None:
        # 1. 文字列から構築
        tags = TagSet.from_string("tag3, tag1, tag2, tag1")
        # 2. 別集合・文字列リストをマージ
        tags.merge(TagSet.from_string("tag2, tag5"))
        tags.merge_from_strings(["tag4", " tag0 "])
        # 3. 削除
        tags.remove("tag5")
        # 4. 正規表記の往復
        rendered = tags.get()
        assert rendered == "tag0, tag1, tag2, tag3, tag4"
        assert TagSet.from_string(rendered).same(tags)

    def test_strict_config_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tagset.yml"
        config_file.write_text(
            "tagset:\n  tag_string_max: 12\n  strict_length_check: true\n", encoding="utf-8"
        )
        config = load_config(config_file)

        tags = TagSet.from_string("aaa, bbb", config=config)
        with pytest.raises(InvalidTagsLengthError):
            tags.add("ccc")
        with pytest.raises(InvalidTagsLengthError):
            tags.replace("a, b, c, d, e, f")
        assert tags.get() == "aaa, bbb"
        assert tags.copy().config is config

    def test_cli_canonicalizes_csv(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        input_csv = tmp_path / "in.csv"
        output_csv = tmp_path / "out" / "result.csv"
        pl.DataFrame({"name": ["x", "y", "z"], "tags": ["b,a", "bad!", "c, c"]}).write_csv(input_csv)

        monkeypatch.setattr(
            sys,
            "argv",
            ["tagset-canonicalize", "--input", str(input_csv), "--output", str(output_csv)],
        )
        canonicalize_tags.main()

        result = pl.read_csv(output_csv, infer_schema_length=0)
        assert result["name"].to_list() == ["x", "y", "z"]
        assert result["tags"].to_list() == ["a, b", None, "c"]

"""CSV のタグリスト列を正規表記に揃えるツール.

各行のカンマ区切りタグリストを TagSet として解釈し、
ソート済み・重複なしの ``", "`` 区切り表記に変換します。
検証に失敗した行は null にして警告ログを出します。
"""

from __future__ import annotations

import argparse
from pathlib import Path

import polars as pl
from loguru import logger

from tagset.core.config import TagSetConfig, load_config
from tagset.core.exceptions import TagSetError
from tagset.core.tags import TagSet


def canonicalize_tag_list(raw: str | None, config: TagSetConfig | None = None) -> str | None:
    """1つのタグリスト文字列を正規表記に変換する.

    Args:
        raw: カンマ区切りのタグリスト（None 可）
        config: 検証設定

    Returns:
        正規表記。入力が None、または検証に失敗した場合は None
    """
    if raw is None:
        return None
    try:
        return TagSet.from_string(raw, config=config).get()
    except TagSetError as e:
        logger.warning(f"Invalid tag list {raw!r}: {e}")
        return None


def canonicalize_tag_column(
    df: pl.DataFrame,
    column: str = "tags",
    config: TagSetConfig | None = None,
    output_column: str | None = None,
) -> pl.DataFrame:
    """DataFrame のタグリスト列を正規表記に変換する.

    Args:
        df: 入力 DataFrame
        column: タグリスト列名
        config: 検証設定
        output_column: 出力列名（None の場合は column を上書き）

    Returns:
        変換後の DataFrame

    Raises:
        ValueError: df に column が存在しない場合

    Examples:
        >>> df = pl.DataFrame({"tags": ["b, a, a", ",c,"]})
        >>> canonicalize_tag_column(df)["tags"].to_list()
        ['a, b', 'c']
    """
    if column not in df.columns:
        msg = f"canonicalize_tag_column() requires '{column}' column in df. Got: {df.columns}"
        raise ValueError(msg)

    return df.with_columns(
        pl.col(column)
        .map_elements(lambda raw: canonicalize_tag_list(raw, config), return_dtype=pl.String)
        .alias(output_column or column)
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Canonicalize comma separated tag lists in a CSV column.")
    parser.add_argument("--input", type=Path, required=True, help="Input CSV path")
    parser.add_argument("--output", type=Path, required=True, help="Output CSV path")
    parser.add_argument("--column", type=str, default="tags", help="Tag list column name (default: tags)")
    parser.add_argument(
        "--output-column",
        type=str,
        default=None,
        help="Write results to this column instead of overwriting --column",
    )
    parser.add_argument("--config", type=Path, default=None, help="tagset config YAML")
    args = parser.parse_args()

    config = load_config(args.config) if args.config else None

    df = pl.read_csv(args.input, infer_schema_length=0)
    logger.info(f"Loaded {len(df)} rows from {args.input}")

    result = canonicalize_tag_column(df, args.column, config=config, output_column=args.output_column)

    target = args.output_column or args.column
    # 入力が null でないのに結果が null の行 = 検証失敗
    invalid = int((result[target].is_null() & df[args.column].is_not_null()).sum())
    args.output.parent.mkdir(parents=True, exist_ok=True)
    result.write_csv(args.output)
    logger.info(f"Wrote {len(result)} rows to {args.output} (invalid={invalid})")


if __name__ == "__main__":
    main()

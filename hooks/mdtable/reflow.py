"""テーブル整形エンジン: 文書行 → 置換指示リスト

ブロックごとに パース → 検証 → 列幅計算 → 再出力 を行い、
成功したブロックだけを元の行範囲と組にして返す。
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Sequence

from mdtable.cells import parse_markdown
from mdtable.grid import Invalid, validate_grid
from mdtable.layout import column_widths, render_table
from mdtable.scanner import TableBlock, scan_blocks


class Replacement(NamedTuple):
    start_line: int
    end_line: int  # exclusive
    text: str


class Skipped(NamedTuple):
    start_line: int
    end_line: int  # exclusive
    reason: str


def reflow_block(
    block: TableBlock,
    parse: Callable[[str], dict] = parse_markdown,
    strict_separator: bool = True,
) -> Replacement | Skipped:
    """1ブロックを整形する。検証に失敗した場合は Skipped を返す。"""
    result = validate_grid(parse(block.text), strict_separator=strict_separator)
    if isinstance(result, Invalid):
        return Skipped(block.start_line, block.end_line, result.reason)

    widths = column_widths(result.header, result.body)
    text = render_table(result.header, result.body, widths)
    return Replacement(block.start_line, block.end_line, text)


def reflow_document(
    lines: Sequence[str],
    parse: Callable[[str], dict] = parse_markdown,
    strict_separator: bool = True,
    skip_fenced: bool = False,
    should_stop: Callable[[], bool] | None = None,
) -> tuple[list[Replacement], list[Skipped]]:
    """文書全体を整形し、(置換指示, スキップしたブロック) を文書順で返す。

    should_stop はブロックの処理前に毎回呼ばれ、True を返したら
    以降のブロックは処理しない（それまでの結果は返す）。
    """
    replacements: list[Replacement] = []
    skipped: list[Skipped] = []

    for block in scan_blocks(lines, skip_fenced=skip_fenced):
        if should_stop is not None and should_stop():
            break
        outcome = reflow_block(block, parse=parse, strict_separator=strict_separator)
        if isinstance(outcome, Skipped):
            skipped.append(outcome)
        else:
            replacements.append(outcome)

    return replacements, skipped


def reflow(
    lines: Sequence[str],
    parse: Callable[[str], dict] = parse_markdown,
    strict_separator: bool = True,
    skip_fenced: bool = False,
    should_stop: Callable[[], bool] | None = None,
) -> list[Replacement]:
    """文書行からテーブル整形の置換指示リストを返す。"""
    replacements, _ = reflow_document(
        lines,
        parse=parse,
        strict_separator=strict_separator,
        skip_fenced=skip_fenced,
        should_stop=should_stop,
    )
    return replacements


def apply_replacements(lines: Sequence[str], replacements: list[Replacement]) -> list[str]:
    """置換指示を行リストに適用する。

    後ろの範囲から置き換えるので、前の範囲の行番号はずれない。
    置換テキスト末尾の改行は行の区切りとして扱い、空行は追加しない。
    """
    result = list(lines)
    for rep in sorted(replacements, key=lambda r: r.start_line, reverse=True):
        text = rep.text[:-1] if rep.text.endswith("\n") else rep.text
        result[rep.start_line:rep.end_line] = text.split("\n")
    return result


def detect_newline(text: str) -> str:
    if "\r\n" in text:
        return "\r\n"
    if "\r" in text and "\n" not in text:
        return "\r"
    return "\n"


def split_text(text: str) -> tuple[list[str], str, bool]:
    """テキストを (行リスト, 改行コード, 末尾改行の有無) に分割する。

    行の区切りは検出した改行コード（\\r\\n / \\n / \\r）のみ。str.splitlines と違い、
    \\x0c や \\u2028 では分割しない。
    """
    newline = detect_newline(text)
    lines = text.split(newline)
    # 末尾改行があると最後の要素は空文字列になる
    trailing_newline = lines[-1] == ""
    if trailing_newline:
        lines.pop()
    return lines, newline, trailing_newline

"""スキップ理由 → 警告メッセージ（一覧表示は tabulate ベース）"""
from __future__ import annotations

from tabulate import tabulate

from mdtable.grid import MISSING_SEPARATOR, NOT_A_TABLE, SHAPE_MISMATCH
from mdtable.reflow import Skipped

REASON_MESSAGES = {
    NOT_A_TABLE: "not recognized as a single table",
    SHAPE_MISMATCH: "rows have different numbers of cells",
    MISSING_SEPARATOR: "no separator row (|---|) after the header",
}


def _line_range(skip: Skipped) -> str:
    # 表示は1始まり、end_line は排他的なのでそのまま最終行番号になる
    first, last = skip.start_line + 1, skip.end_line
    return str(first) if last <= first else f"{first}-{last}"


def describe_skip(skip: Skipped) -> str:
    """1件のスキップを警告メッセージにする。例: "line 3: table skipped (...)" """
    message = REASON_MESSAGES.get(skip.reason, skip.reason)
    return f"line {skip.start_line + 1}: table skipped ({message})"


def format_skip_report(skipped: list[Skipped]) -> str:
    """スキップ一覧を表形式の文字列にする。空なら空文字列。"""
    if not skipped:
        return ""
    rows = [
        [_line_range(s), s.reason, REASON_MESSAGES.get(s.reason, "")]
        for s in skipped
    ]
    return tabulate(rows, headers=["lines", "reason", "detail"], tablefmt="simple", disable_numparse=True)

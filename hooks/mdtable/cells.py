"""パイプ区切りテキスト → セルグリッド変換

テーブル整形エンジンが使うデフォルトのパーサ。戻り値は
{"blocks": [{"type": "table", "header": [...], "body": [[...], ...]}, ...]} 形式。
"""
from __future__ import annotations

from itertools import groupby

# エスケープパイプはセル区切りとして扱わない（一時置換して元に戻す）
_ESCAPED_PIPE = r"\|"
_PLACEHOLDER = "\x00"


def split_row(line: str) -> list[str]:
    """パイプ区切りの1行をセルのリストに分割する。

    先頭の | だけを除去して分割するため、| で終わる行は末尾に空セル
    （ファントムセル）が1つ付く。セルの strip は行わない。
    """
    line = line.replace(_ESCAPED_PIPE, _PLACEHOLDER).rstrip()
    if line.startswith("|"):
        line = line[1:]
    return [c.replace(_PLACEHOLDER, _ESCAPED_PIPE) for c in line.split("|")]


def _line_kind(line: str) -> str:
    if not line.strip():
        return "blank"
    return "table" if line.startswith("|") else "paragraph"


def parse_markdown(text: str) -> dict:
    """テキストをブロック列にパースする。

    | で始まる連続行は "table" ブロック（1行目がヘッダー、残りがボディ）、
    それ以外の連続行は "paragraph" ブロックになる。空行はブロックを区切る。
    セパレータ行はボディの先頭行としてそのまま残す。
    """
    blocks: list[dict] = []
    for kind, group in groupby(text.split("\n"), key=_line_kind):
        if kind == "blank":
            continue
        lines = list(group)
        if kind == "table":
            rows = [split_row(line) for line in lines]
            blocks.append({"type": "table", "header": rows[0], "body": rows[1:]})
        else:
            blocks.append({"type": "paragraph", "text": "\n".join(lines)})
    return {"blocks": blocks}

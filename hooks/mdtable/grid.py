"""パーサ出力の正規化とテーブル検証"""
from __future__ import annotations

import re
from typing import NamedTuple

# スキップ理由（チェック順）
NOT_A_TABLE = "NotATable"
SHAPE_MISMATCH = "ShapeMismatch"
MISSING_SEPARATOR = "MissingSeparator"

# ダッシュと空白以外を含まないセル
_SEPARATOR_CELL_RE = re.compile(r"^[-\s]*$")


class Valid(NamedTuple):
    header: list[str]
    body: list[list[str]]


class Invalid(NamedTuple):
    reason: str


def _drop_phantom(row: list[str]) -> list[str]:
    if row and row[-1] == "":
        return row[:-1]
    return row


def normalize_grid(header: list[str], body: list[list[str]]) -> tuple[list[str], list[list[str]]]:
    """末尾のファントムセル（空文字列）をヘッダーと全ボディ行から除去する。"""
    return _drop_phantom(header), [_drop_phantom(row) for row in body]


def _as_cells(value: object) -> list[str] | None:
    if not isinstance(value, (list, tuple)):
        return None
    if not all(isinstance(cell, str) for cell in value):
        return None
    return list(value)


def extract_grid(parsed: object) -> tuple[list[str], list[list[str]]] | None:
    """パーサ出力から唯一の table ブロックの (header, body) を取り出す。

    ブロックが1つでない、table 型でない、セルが文字列でない場合は None。
    """
    blocks = parsed.get("blocks") if isinstance(parsed, dict) else None
    if not isinstance(blocks, list) or len(blocks) != 1:
        return None

    block = blocks[0]
    if not isinstance(block, dict) or block.get("type") != "table":
        return None

    header = _as_cells(block.get("header"))
    raw_body = block.get("body", [])
    if header is None or not isinstance(raw_body, (list, tuple)):
        return None

    body: list[list[str]] = []
    for raw_row in raw_body:
        row = _as_cells(raw_row)
        if row is None:
            return None
        body.append(row)
    return header, body


def is_separator_row(row: list[str]) -> bool:
    return all(_SEPARATOR_CELL_RE.match(cell) for cell in row)


def validate_grid(parsed: object, strict_separator: bool = True) -> Valid | Invalid:
    """パーサ出力を Valid(header, セパレータ除去後の body) か Invalid(reason) に分類する。

    形状チェックはセパレータ判定より先に行う（空ボディや不揃いな行で
    body[0] を参照しないため）。strict_separator=False の場合は
    セパレータ行がなくても Valid とする。
    """
    grid = extract_grid(parsed)
    if grid is None:
        return Invalid(NOT_A_TABLE)

    header, body = normalize_grid(*grid)
    if not header:
        return Invalid(NOT_A_TABLE)

    if any(len(row) != len(header) for row in body):
        return Invalid(SHAPE_MISMATCH)

    if body and is_separator_row(body[0]):
        return Valid(header, body[1:])
    if strict_separator:
        return Invalid(MISSING_SEPARATOR)
    return Valid(header, body)

"""列幅計算と Markdown テーブルの再出力"""
from __future__ import annotations


def _cell(row: list[str], index: int) -> str:
    # 列数が足りない行は空セル扱い
    return row[index] if index < len(row) else ""


def column_widths(header: list[str], body: list[list[str]]) -> list[int]:
    """列ごとに、ヘッダーと全ボディ行の strip 後の最大文字数を返す。"""
    widths = [len(cell.strip()) for cell in header]
    for row in body:
        for index, width in enumerate(widths):
            widths[index] = max(width, len(_cell(row, index).strip()))
    return widths


def render_row(row: list[str], widths: list[int]) -> str:
    cells = "".join(f" {_cell(row, i).strip().ljust(w)} |" for i, w in enumerate(widths))
    return f"|{cells}\n"


def render_separator(widths: list[int]) -> str:
    # 両側1スペース分のパディングを含めて width + 2
    return "|" + "".join("-" * (w + 2) + "|" for w in widths) + "\n"


def render_table(header: list[str], body: list[list[str]], widths: list[int]) -> str:
    """ヘッダー行、セパレータ行、ボディ行を列幅に揃えて出力する。

    各行は "\\n" で終わる。セルは strip してから右側を空白で埋める（切り詰めない）。
    """
    lines = [render_row(header, widths), render_separator(widths)]
    lines.extend(render_row(row, widths) for row in body)
    return "".join(lines)

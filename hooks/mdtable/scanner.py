"""文書行 → テーブルブロック候補の切り出し"""
from __future__ import annotations

import re
from typing import NamedTuple, Sequence

ROW_MARKER = "|"

# fenced code block の開始行: 3文字以上の ` or ~ の連続（言語指定付き含む）
_FENCE_OPEN_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})")
# 終了行: 同じ文字の連続のみ
_FENCE_CLOSE_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})[ \t]*$")


class TableBlock(NamedTuple):
    lines: tuple[str, ...]
    start_line: int
    end_line: int  # exclusive

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def is_table_line(line: str) -> bool:
    return line.startswith(ROW_MARKER)


def _closes_fence(line: str, fence: str) -> bool:
    """開始と同じ文字で、開始以上の長さの連続なら閉じる。"""
    m = _FENCE_CLOSE_RE.match(line)
    return m is not None and m.group(1)[0] == fence[0] and len(m.group(1)) >= len(fence)


def scan_blocks(lines: Sequence[str], skip_fenced: bool = False) -> list[TableBlock]:
    """| で始まる連続行をテーブルブロック候補としてまとめる。

    状態は「ブロック外」（start が None）と「ブロック内」の2つ。
    非該当行に遷移した時点、または入力終端でブロックを確定する。
    入力終端で閉じたブロックの end_line は len(lines)。

    skip_fenced=True の場合、fenced code block 内の行は該当行として扱わない。
    """
    blocks: list[TableBlock] = []
    start: int | None = None
    fence: str | None = None

    for index, line in enumerate(lines):
        in_fence = fence is not None
        if skip_fenced:
            if in_fence:
                if _closes_fence(line, fence):
                    fence = None
            else:
                m = _FENCE_OPEN_RE.match(line)
                if m:
                    fence = m.group(1)

        qualifies = not in_fence and is_table_line(line)
        if qualifies and start is None:
            start = index
        elif not qualifies and start is not None:
            blocks.append(TableBlock(tuple(lines[start:index]), start, index))
            start = None

    if start is not None:
        blocks.append(TableBlock(tuple(lines[start:]), start, len(lines)))

    return blocks

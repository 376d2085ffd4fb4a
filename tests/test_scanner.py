"""tests/test_scanner.py — テーブルブロック候補の切り出しのテスト"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "hooks"))

from mdtable.scanner import TableBlock, is_table_line, scan_blocks  # noqa: E402


class TestIsTableLine:
    def test_pipe_first(self):
        assert is_table_line("| a |")

    def test_indented_pipe_is_not_table_line(self):
        assert not is_table_line("  | a |")

    def test_plain_text(self):
        assert not is_table_line("a | b")


class TestScanBlocks:
    """scan_blocks のテスト"""

    def test_no_table_lines(self):
        assert scan_blocks(["hello", "world"]) == []

    def test_empty_document(self):
        assert scan_blocks([]) == []

    def test_block_closed_by_text(self):
        lines = ["intro", "| a |", "|---|", "outro"]
        assert scan_blocks(lines) == [TableBlock(("| a |", "|---|"), 1, 3)]

    def test_block_open_at_end_of_document(self):
        """文書末尾で閉じたブロックの end_line は行数と一致する（余計な行を作らない）"""
        lines = ["intro", "| a |", "|---|"]
        blocks = scan_blocks(lines)
        assert blocks == [TableBlock(("| a |", "|---|"), 1, 3)]
        assert blocks[0].end_line == len(lines)

    def test_two_disjoint_blocks(self):
        """Scenario B: テキスト行で区切られた2ブロック"""
        blocks = scan_blocks(["| x |", "text", "| y |", "| z |"])
        assert blocks == [
            TableBlock(("| x |",), 0, 1),
            TableBlock(("| y |", "| z |"), 2, 4),
        ]

    def test_blank_line_closes_block(self):
        blocks = scan_blocks(["| a |", "", "| b |"])
        assert [(b.start_line, b.end_line) for b in blocks] == [(0, 1), (2, 3)]

    def test_block_text_joins_lines(self):
        block = scan_blocks(["| a |", "|---|"])[0]
        assert block.text == "| a |\n|---|"

    def test_accepts_tuple_input(self):
        blocks = scan_blocks(("| a |", "text"))
        assert blocks == [TableBlock(("| a |",), 0, 1)]

    def test_fenced_lines_included_by_default(self):
        lines = ["```", "| a |", "```", "| b |"]
        blocks = scan_blocks(lines)
        assert [(b.start_line, b.end_line) for b in blocks] == [(1, 2), (3, 4)]

    def test_skip_backtick_fence(self):
        """skip_fenced=True ではコードブロック内の行を無視する"""
        lines = ["```", "| a |", "|---|", "```", "| b |", "|---|"]
        blocks = scan_blocks(lines, skip_fenced=True)
        assert blocks == [TableBlock(("| b |", "|---|"), 4, 6)]

    def test_skip_tilde_fence_with_info_string(self):
        lines = ["~~~markdown", "| a |", "~~~", "| b |"]
        blocks = scan_blocks(lines, skip_fenced=True)
        assert blocks == [TableBlock(("| b |",), 3, 4)]

    def test_fence_closed_only_by_same_marker(self):
        """``` で始まったブロックは ~~~ では閉じない"""
        lines = ["```", "~~~", "| a |", "```", "| b |"]
        blocks = scan_blocks(lines, skip_fenced=True)
        assert [(b.start_line, b.end_line) for b in blocks] == [(4, 5)]

    def test_unclosed_fence_hides_rest_of_document(self):
        lines = ["| a |", "```", "| b |"]
        blocks = scan_blocks(lines, skip_fenced=True)
        assert blocks == [TableBlock(("| a |",), 0, 1)]

    def test_four_backtick_fence_closed_by_same_length(self):
        lines = ["````", "| a |", "````", "| b |"]
        blocks = scan_blocks(lines, skip_fenced=True)
        assert blocks == [TableBlock(("| b |",), 3, 4)]

    def test_longer_closing_fence(self):
        """閉じ側は開始以上の長さなら閉じる"""
        lines = ["```", "| a |", "`````", "| b |"]
        blocks = scan_blocks(lines, skip_fenced=True)
        assert blocks == [TableBlock(("| b |",), 3, 4)]

    def test_shorter_closing_fence_does_not_close(self):
        lines = ["~~~~", "| a |", "~~~", "| b |", "~~~~", "| c |"]
        blocks = scan_blocks(lines, skip_fenced=True)
        assert blocks == [TableBlock(("| c |",), 5, 6)]

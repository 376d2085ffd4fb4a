#!/usr/bin/env python3
"""PostToolUse hook: 編集された Markdown ファイル内のテーブルを整形する。

hook 入力（stdin JSON）の tool_input.file_path を対象にする。
コマンドライン引数でパスを渡した場合はそれらのファイルを整形する。
整形できなかったテーブルは stderr に警告として出力する。
"""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
from mdtable.config import load_config, resolve_options
from mdtable.reflow import Skipped, apply_replacements, reflow_document, split_text
from mdtable.report import describe_skip, format_skip_report

DEBUG = os.environ.get("MD_TABLE_REFLOW_DEBUG") == "1"
_DEBUG_FILE = "/tmp/md-table-reflow-debug.txt"


def _dbg(msg: str) -> None:
    if DEBUG:
        with open(_DEBUG_FILE, "a") as f:
            f.write(f"[markdown] {msg}\n")


def reflow_text(
    text: str, strict_separator: bool = True, skip_fenced: bool = False
) -> tuple[str, list[Skipped]]:
    """テキスト中のテーブルを整形し、(整形後テキスト, スキップ一覧) を返す。

    改行コード（\\r\\n / \\n）と末尾改行の有無は元のテキストに合わせる。
    """
    lines, newline, trailing_newline = split_text(text)

    replacements, skipped = reflow_document(
        lines, strict_separator=strict_separator, skip_fenced=skip_fenced
    )
    if not replacements:
        return text, skipped

    result = newline.join(apply_replacements(lines, replacements))
    if trailing_newline:
        result += newline
    return result, skipped


def format_file(path: Path, strict_separator: bool, skip_fenced: bool) -> tuple[bool, list[Skipped]]:
    """ファイルを整形して上書きする。(変更があったか, スキップ一覧) を返す。"""
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()

    new_text, skipped = reflow_text(text, strict_separator, skip_fenced)
    changed = new_text != text
    if changed:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(new_text)
    return changed, skipped


def _paths_from_hook_input() -> list[str]:
    try:
        hook_input = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        print(f"[format_markdown.py] Failed to parse stdin: {e}", file=sys.stderr)
        return []
    if not isinstance(hook_input, dict):
        return []
    tool_input = hook_input.get("tool_input") or {}
    file_path = tool_input.get("file_path", "") if isinstance(tool_input, dict) else ""
    return [file_path] if file_path else []


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    paths = args if args else _paths_from_hook_input()
    if not paths:
        _dbg("skip: no target file")
        sys.exit(0)

    try:
        strict_separator, skip_fenced, extensions = resolve_options(load_config())
    except (OSError, ValueError) as e:
        print(f"[format_markdown.py] Config error: {e}", file=sys.stderr)
        sys.exit(1)

    for raw_path in paths:
        path = Path(raw_path)
        if path.suffix.lower() not in extensions:
            _dbg(f"skip: not markdown {raw_path!r}")
            continue

        try:
            changed, skipped = format_file(path, strict_separator, skip_fenced)
        except (OSError, UnicodeDecodeError) as e:
            print(f"[format_markdown.py] Cannot format {raw_path}: {e}", file=sys.stderr)
            continue

        _dbg(f"{raw_path}: changed={changed} skipped={len(skipped)}")
        if len(skipped) == 1:
            print(f"[format_markdown.py] {raw_path}: {describe_skip(skipped[0])}", file=sys.stderr)
        elif skipped:
            print(f"[format_markdown.py] {raw_path}: {len(skipped)} tables skipped", file=sys.stderr)
            print(format_skip_report(skipped), file=sys.stderr)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Formatter endpoint: 文書を JSON で受け取り、テーブル整形の置換指示を JSON で返す。

stdin:  {"lines": ["| a | bb |", ...]} または {"text": "..."}
        任意で {"options": {"strictSeparator": false, "skipFencedCode": true}}
stdout: {"edits": [{"startLine", "endLine", "replacementText"}], "warnings": [...]}
"""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
from mdtable.config import load_config, resolve_options
from mdtable.reflow import reflow_document, split_text
from mdtable.report import describe_skip

DEBUG = os.environ.get("MD_TABLE_REFLOW_DEBUG") == "1"
_DEBUG_FILE = "/tmp/md-table-reflow-debug.txt"


def _dbg(msg: str) -> None:
    if DEBUG:
        with open(_DEBUG_FILE, "a") as f:
            f.write(f"[edits] {msg}\n")


def read_lines(request: dict) -> list[str]:
    """リクエストから文書行を取り出す。"lines" を優先し、なければ "text" を行分割する。"""
    lines = request.get("lines")
    if lines is not None:
        if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
            raise ValueError('"lines" must be a list of strings')
        return lines
    text = request.get("text")
    if isinstance(text, str):
        lines, _, _ = split_text(text)
        return lines
    raise ValueError('request must contain "lines" or "text"')


def build_response(lines: list[str], strict_separator: bool, skip_fenced: bool) -> dict:
    replacements, skipped = reflow_document(
        lines, strict_separator=strict_separator, skip_fenced=skip_fenced
    )
    return {
        "edits": [
            {"startLine": r.start_line, "endLine": r.end_line, "replacementText": r.text}
            for r in replacements
        ],
        "warnings": [
            {
                "startLine": s.start_line,
                "endLine": s.end_line,
                "reason": s.reason,
                "message": describe_skip(s),
            }
            for s in skipped
        ],
    }


def main() -> None:
    try:
        request = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        print(f"[format_edits.py] Failed to parse stdin: {e}", file=sys.stderr)
        sys.exit(1)

    if not isinstance(request, dict):
        print("[format_edits.py] Request must be a JSON object", file=sys.stderr)
        sys.exit(1)

    try:
        lines = read_lines(request)
    except ValueError as e:
        print(f"[format_edits.py] Invalid request: {e}", file=sys.stderr)
        sys.exit(1)

    # リクエスト内の options は設定ファイルより優先
    overrides = request.get("options") or {}
    try:
        config = load_config()
        if not isinstance(overrides, dict):
            raise ValueError('"options" must be an object')
        strict_separator, skip_fenced, _ = resolve_options({**config, **overrides})
    except (OSError, ValueError) as e:
        print(f"[format_edits.py] Config error: {e}", file=sys.stderr)
        sys.exit(1)

    response = build_response(lines, strict_separator, skip_fenced)
    _dbg(f"{len(lines)} lines -> {len(response['edits'])} edits, {len(response['warnings'])} warnings")

    json.dump(response, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()

from __future__ import annotations

import json
import os
from pathlib import Path

DEFAULT_EXTENSIONS = [".md", ".markdown"]


def config_path() -> Path:
    """MD_TABLE_REFLOW_CONFIG > ~/.md-table-reflow/config.json の優先順で解決。"""
    env_path = os.environ.get("MD_TABLE_REFLOW_CONFIG")
    if env_path:
        return Path(env_path)
    return Path.home() / ".md-table-reflow" / "config.json"


def load_config() -> dict:
    """設定ファイルを読み込む。ファイルがなければ空 dict（すべてデフォルト値）。"""
    path = config_path()
    if not path.exists():
        return {}
    with open(path) as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise ValueError(f"Config root must be an object: {path}")
    return config


def resolve_options(config: dict) -> tuple[bool, bool, list[str]]:
    """config から (strict_separator, skip_fenced, extensions) を解決する。
    型が不正な値は ValueError を raise する。
    """
    strict_separator = config.get("strictSeparator", True)
    skip_fenced = config.get("skipFencedCode", False)
    extensions = config.get("extensions", DEFAULT_EXTENSIONS)

    if not isinstance(strict_separator, bool):
        raise ValueError(f"strictSeparator must be a boolean: {strict_separator!r}")
    if not isinstance(skip_fenced, bool):
        raise ValueError(f"skipFencedCode must be a boolean: {skip_fenced!r}")
    if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
        raise ValueError(f"extensions must be a list of strings: {extensions!r}")

    return strict_separator, skip_fenced, [e.lower() for e in extensions]

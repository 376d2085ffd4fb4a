"""Markdown パイプテーブルの整形（列幅揃え）。

Submodules:
  cells    -- パイプ区切りテキスト → セルグリッド（パーサ）
  scanner  -- 文書行からテーブルブロック候補を切り出す
  grid     -- ファントムセル除去とテーブル検証
  layout   -- 列幅計算と Markdown 再出力
  reflow   -- 置換指示の組み立て（エンジン本体）
  config   -- ~/.md-table-reflow/config.json の読み込み
  report   -- スキップ理由の警告メッセージ
"""

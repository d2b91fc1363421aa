# src/keyscope/lang/ja.py
STRINGS = {
    "prompt.error_on_parse_custom_regex": "カスタム正規表現の解析に失敗しました: {pattern}",
    "cli.description": "keyscope - ソースコード内の i18n キー使用箇所を検出します",
    "cli.scanning": "{path} をスキャン中 (フレームワーク: {frameworks})",
    "cli.no_files": "ソースファイルが見つかりませんでした。",
    "cli.summary": "{files} 個のファイルで {keys} 件のキー使用箇所が見つかりました。",
    "cli.saved": "レポートを保存しました: {path}",
    "cli.path_not_found": "パスが見つかりません: {path}",
    "scanner.read_failed": "{path} を読み込めませんでした: {error}",
}

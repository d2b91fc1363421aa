# src/keyscope/lang/en.py
STRINGS = {
    "prompt.error_on_parse_custom_regex": "Failed to parse custom regex: {pattern}",
    "cli.description": "keyscope - find i18n key usages in source code",
    "cli.scanning": "Scanning {path} with frameworks: {frameworks}",
    "cli.no_files": "No source files found.",
    "cli.summary": "Found {keys} key usage(s) in {files} file(s).",
    "cli.saved": "Report saved to: {path}",
    "cli.path_not_found": "Path not found: {path}",
    "scanner.read_failed": "Could not read {path}: {error}",
}

# src/keyscope/main.py
"""
Main entry point for keyscope.

This module provides the command-line interface for scanning a file or a
project directory for i18n key usages.

The workflow follows these steps:
1. Parse command-line arguments
2. Resolve settings and frameworks (explicit, configured, or detected)
3. Collect source files
4. Scan every file for key usages
5. Write the JSON report
"""
import argparse
import functools
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from keyscope.config import Settings, config, enabled_frameworks
from keyscope.frameworks import Framework, available_frameworks, create_framework, detect_frameworks
from keyscope.i18n import available_locales, set_locale, t
from keyscope.log import LoggingErrorReporter, configure_logging
from keyscope.scanner import scan_paths, scan_project

logger = logging.getLogger(__name__)

DEFAULT_FRAMEWORK = "next-intl"


def resolve_frameworks(framework_ids: Optional[List[str]], project_root: Path) -> List[Framework]:
    """
    Pick the framework adapters for a scan.

    Explicit ids win, then ``[frameworks] enabled`` from config.ini, then
    detection from ``package.json`` in *project_root*.  Falls back to
    next-intl when nothing is detected.
    """
    ids = framework_ids or enabled_frameworks(config)
    if ids:
        return [create_framework(i) for i in ids]

    package_json = project_root / "package.json"
    if package_json.is_file():
        try:
            detected = detect_frameworks(json.loads(package_json.read_text(encoding="utf-8")))
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", package_json, e)
            detected = []
        if detected:
            return detected
    return [create_framework(DEFAULT_FRAMEWORK)]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for keyscope.

    Returns:
        Process exit code.
    """
    parser = argparse.ArgumentParser(description=t("cli.description"))
    parser.add_argument("path", help="File or project directory to scan")
    parser.add_argument("--framework", action="append", choices=available_frameworks(),
                        help="Framework adapter to use (repeatable); detected from package.json by default")
    parser.add_argument("--default-namespace", metavar="NS",
                        help="Namespace for keys used outside any scope")
    parser.add_argument("--disable-path-parsing", action="store_true",
                        help="Report keys ending in '.' instead of ignoring them")
    parser.add_argument("--output", metavar="FILE",
                        help="Write the JSON report to FILE instead of stdout")
    parser.add_argument("--lang", choices=available_locales(), default='en',
                        help="Message language (en: English, ja: Japanese)")

    args = parser.parse_args(argv)

    configure_logging()
    set_locale(args.lang)

    target = Path(args.path)
    if not target.exists():
        parser.error(t("cli.path_not_found", path=target))

    base = Settings.from_config(config)
    settings = Settings(
        disable_path_parsing=args.disable_path_parsing or base.disable_path_parsing,
        default_namespace=args.default_namespace or base.default_namespace,
        regex_key=base.regex_key,
    )

    project_root = target if target.is_dir() else target.parent
    frameworks = resolve_frameworks(args.framework, project_root)
    files = scan_project(str(target)) if target.is_dir() else [target]
    if not files:
        print(t("cli.no_files"))
        return 0

    logger.info(t("cli.scanning", path=target, frameworks=", ".join(f.id for f in frameworks)))
    # stdout carries the JSON report
    reporter = LoggingErrorReporter(notify=functools.partial(print, file=sys.stderr))
    results = scan_paths(files, frameworks, settings=settings, reporter=reporter)

    report = {path: [k.to_dict() for k in keys] for path, keys in results.items()}
    payload = json.dumps(report, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(payload)
        print(t("cli.saved", path=args.output))
    else:
        print(payload)

    total = sum(len(keys) for keys in results.values())
    logger.info(t("cli.summary", keys=total, files=len(results)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

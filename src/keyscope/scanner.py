# src/keyscope/scanner.py
"""
Document and project scanning for keyscope.

Glues the framework adapters to the matching core: every enabled framework
contributes its scopes and matchers, all of them share one claimed-offset
set per document, and keys are rewritten through every framework in turn.

Functions:
    language_id_for_path: Map a file name to an editor language id
    discover_scopes: Collect scope ranges from every framework
    make_rewriter: Compose the frameworks' key rewriters
    scan_document: Find all keys in one document
    scan_project: Recursively find scannable source files
    scan_paths: Scan many files and map each path to its keys
"""
import logging
import os
from pathlib import Path
from typing import Dict, List, MutableSet, Optional, Sequence

from .config import Settings
from .frameworks import Framework
from .i18n import t
from .interfaces import ErrorReporter, KeyRewriter
from .matcher import find_keys
from .models import REWRITE_KEY_SOURCES, KeyInDocument, RewriteKeyContext, ScopeRange
from .performance import performance_monitor

__all__ = [
    "language_id_for_path",
    "discover_scopes",
    "make_rewriter",
    "scan_document",
    "scan_project",
    "scan_paths",
]

logger = logging.getLogger(__name__)

_LANGUAGE_IDS = {
    '.js': 'javascript',
    '.mjs': 'javascript',
    '.cjs': 'javascript',
    '.ts': 'typescript',
    '.mts': 'typescript',
    '.cts': 'typescript',
    '.jsx': 'javascriptreact',
    '.tsx': 'typescriptreact',
    '.ejs': 'ejs',
    '.vue': 'vue',
    '.svelte': 'svelte',
    '.html': 'html',
}

_IGNORE_DIRS = frozenset({'.git', '.next', '.venv', '__pycache__', 'node_modules', 'dist', 'build', 'out'})


def language_id_for_path(path) -> Optional[str]:
    """Editor language id for *path*, or *None* for unsupported files."""
    return _LANGUAGE_IDS.get(Path(path).suffix.lower())


def discover_scopes(
    text: str,
    language_id: str,
    frameworks: Sequence[Framework],
) -> Optional[List[ScopeRange]]:
    """
    Scope ranges contributed by every framework for this document.

    Returns:
        The concatenated ranges in framework order, or *None* when no
        framework detects scopes for *language_id*.
    """
    ranges: Optional[List[ScopeRange]] = None
    for framework in frameworks:
        found = framework.get_scope_ranges(text, language_id)
        if found is None:
            continue
        ranges = (ranges or []) + found
    return ranges


def make_rewriter(frameworks: Sequence[Framework]) -> KeyRewriter:
    """Rewriter that passes a key through each framework's ``rewrite_keys``.

    The returned callable raises :class:`ValueError` for a *source* outside
    ``REWRITE_KEY_SOURCES``.
    """
    def rewrite(key: str, source: str, context: Optional[RewriteKeyContext] = None) -> str:
        if source not in REWRITE_KEY_SOURCES:
            raise ValueError(f"Unknown rewrite source: {source!r}")
        for framework in frameworks:
            key = framework.rewrite_keys(key, source, context)
        return key
    return rewrite


def scan_document(
    text: str,
    language_id: str,
    frameworks: Sequence[Framework],
    rewrite_context: Optional[RewriteKeyContext] = None,
    dot_ending: bool = False,
    settings: Optional[Settings] = None,
    reporter: Optional[ErrorReporter] = None,
    starts: Optional[MutableSet[int]] = None,
) -> List[KeyInDocument]:
    """
    Find every key used in one document.

    Frameworks run in the given order against a shared *starts* set, so an
    offset reported by an earlier framework is not reported again.

    Args:
        text: Document text.
        language_id: Editor language id (see :func:`language_id_for_path`).
        frameworks: Enabled framework adapters.
        rewrite_context: Forwarded to the key rewriters.
        dot_ending: Keep keys ending in ``.``.
        settings: Usage options; defaults to the global configuration.
        reporter: Receives diagnostics for malformed matcher templates.
        starts: Claimed offsets; a fresh set when omitted.

    Returns:
        Keys ordered by start offset.
    """
    settings = settings or Settings.from_config()
    if starts is None:
        starts = set()
    active = [f for f in frameworks if f.supports_language(language_id)]
    rewriter = make_rewriter(active)

    keys: List[KeyInDocument] = []
    with performance_monitor.track_operation("scan_document"):
        for framework in active:
            matchers = framework.get_usage_matchers(settings.regex_key, reporter)
            scopes = framework.get_scope_ranges(text, language_id) or []
            keys.extend(find_keys(
                text,
                matchers,
                dot_ending,
                rewrite_context,
                scopes,
                framework.namespace_delimiters,
                rewriter=rewriter,
                settings=settings,
                starts=starts,
            ))
    return sorted(keys, key=lambda k: k.start)


def scan_project(directory: str) -> List[Path]:
    """
    Find scannable source files below *directory*.

    Dependency and build directories are skipped.

    Args:
        directory (str): Root directory path to scan

    Returns:
        List[Path]: Source files, sorted
    """
    files = []
    for root, dirs, filenames in os.walk(directory):
        # Filter directories in-place for efficiency
        dirs[:] = [d for d in dirs if d not in _IGNORE_DIRS]
        for filename in filenames:
            if language_id_for_path(filename):
                files.append(Path(root) / filename)
    return sorted(files)


def scan_paths(
    paths: Sequence[Path],
    frameworks: Sequence[Framework],
    settings: Optional[Settings] = None,
    reporter: Optional[ErrorReporter] = None,
) -> Dict[str, List[KeyInDocument]]:
    """
    Scan each file and map its path to the keys it uses.

    Unreadable files are reported and skipped.  Files without any key usage
    are left out of the result.
    """
    if reporter is None:
        from .log import default_reporter
        reporter = default_reporter
    settings = settings or Settings.from_config()

    results: Dict[str, List[KeyInDocument]] = {}
    with performance_monitor.track_operation("scan_paths"):
        for path in paths:
            language_id = language_id_for_path(path)
            if not language_id:
                continue
            try:
                text = Path(path).read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                reporter.report_error(t("scanner.read_failed", path=path, error=e), True)
                continue
            keys = scan_document(text, language_id, frameworks, settings=settings, reporter=reporter)
            if keys:
                results[str(path)] = keys
    logger.info("Scanned %d file(s), %d with key usages", len(paths), len(results))
    return results

# src/keyscope/matcher.py
"""
Occurrence matching and scope resolution.

Runs compiled usage matchers over a document, works out which namespace
scope (if any) each key literal sits in, and hands the namespaced key to a
framework rewriter.

Pipeline per match:
  1. Pick the capture groups holding the alias and the key
  2. Locate the key literal inside the match
  3. Resolve the enclosing scope (alias-sensitive)
  4. Drop offsets already claimed by an earlier matcher or framework
  5. Prefix the namespace, drop incomplete keys, rewrite
"""
from __future__ import annotations

import dataclasses
import logging
from typing import (
    Iterator,
    List,
    MutableSet,
    Optional,
    Pattern,
    Sequence,
    Tuple,
)

from .config import Settings
from .interfaces import KeyRewriter
from .models import (
    DEFAULT_NAMESPACE_DELIMITERS,
    QUOTE_SYMBOLS,
    REWRITE_SOURCE_REFERENCE,
    KeyInDocument,
    RawOccurrence,
    RewriteKeyContext,
    ScopeRange,
)

__all__ = [
    "select_key_group",
    "find_occurrences",
    "resolve_scope",
    "handle_occurrence",
    "find_keys",
]

logger = logging.getLogger(__name__)


def _identity_rewriter(key: str, source: str, context: Optional[RewriteKeyContext] = None) -> str:
    return key


# ── Capture-group layout ───────────────────────────────────────────────────

def select_key_group(
    has_alias_aware_scope: bool,
    groups: Sequence[Optional[str]],
) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(key, alias)`` from a match's capture groups.

    Group 1 is the key.  When alias-aware scopes are in play and the match
    produced a second group, group 1 is the alias and group 2 the key, so
    single-group matchers keep working alongside alias-capturing ones.
    """
    if has_alias_aware_scope and len(groups) >= 2 and groups[1] is not None:
        return groups[1], groups[0]
    if not groups:
        return None, None
    return groups[0], None


def find_occurrences(
    text: str,
    matchers: Sequence[Pattern[str]],
    has_alias_aware_scope: bool = False,
) -> Iterator[RawOccurrence]:
    """Yield raw occurrences, matcher by matcher, in each matcher's match order."""
    for matcher in matchers:
        for match in matcher.finditer(text):
            key, alias = select_key_group(has_alias_aware_scope, match.groups())
            if not key:
                continue
            yield RawOccurrence(
                matched_text=match.group(0),
                match_index=match.start(),
                captured_key=key,
                alias_name=alias,
            )


# ── Scope resolution ───────────────────────────────────────────────────────

def resolve_scope(
    scopes: Sequence[ScopeRange],
    start: int,
    end: int,
    alias_name: Optional[str] = None,
) -> Optional[ScopeRange]:
    """First scope containing ``[start, end]`` whose alias is unset or matches."""
    for scope in scopes:
        if not scope.contains(start, end):
            continue
        if scope.alias_aware and scope.alias_name != alias_name:
            continue
        return scope
    return None


def handle_occurrence(
    text: str,
    occurrence: RawOccurrence,
    dot_ending: bool = False,
    rewrite_context: Optional[RewriteKeyContext] = None,
    scopes: Sequence[ScopeRange] = (),
    namespace_delimiters: Sequence[str] = DEFAULT_NAMESPACE_DELIMITERS,
    default_namespace: Optional[str] = None,
    starts: Optional[MutableSet[int]] = None,
    rewriter: KeyRewriter = _identity_rewriter,
) -> Optional[KeyInDocument]:
    """Turn one raw occurrence into a :class:`KeyInDocument`, or *None*.

    *starts* is the claimed-offset collection shared across matchers (and
    across frameworks when the caller passes the same instance).  An offset is
    claimed even when the key is later dropped for ending in ``.``.
    """
    key = occurrence.captured_key
    start = occurrence.key_start
    end = occurrence.key_end
    quoted = start > 0 and text[start - 1] in QUOTE_SYMBOLS

    scope = resolve_scope(scopes, start, end, occurrence.alias_name)
    namespace = (scope.namespace if scope else None) or default_namespace

    if starts is not None:
        if start in starts:
            return None
        starts.add(start)

    has_explicit_namespace = any(d in key for d in namespace_delimiters)
    if not has_explicit_namespace and namespace:
        key = f"{namespace}.{key}"

    if not dot_ending and key.endswith('.'):
        return None

    context = dataclasses.replace(rewrite_context or RewriteKeyContext(), namespace=namespace)
    key = rewriter(key, REWRITE_SOURCE_REFERENCE, context)
    return KeyInDocument(key=key, start=start, end=end, quoted=quoted)


def find_keys(
    text: str,
    matchers: Sequence[Pattern[str]],
    dot_ending: bool = False,
    rewrite_context: Optional[RewriteKeyContext] = None,
    scopes: Optional[Sequence[ScopeRange]] = None,
    namespace_delimiters: Optional[Sequence[str]] = None,
    *,
    rewriter: Optional[KeyRewriter] = None,
    settings: Optional[Settings] = None,
    starts: Optional[MutableSet[int]] = None,
) -> List[KeyInDocument]:
    """
    Find every key usage in *text*.

    Args:
        text: Full document text.
        matchers: Compiled usage matchers (see :func:`compile_matchers`).
        dot_ending: Report keys ending in ``.`` instead of dropping them.
        rewrite_context: Passed to *rewriter* with the resolved namespace.
        scopes: Scope ranges discovered for this document.
        namespace_delimiters: Characters marking an explicit namespace;
                              defaults to ``(':', '/')``.
        rewriter: Framework key rewriter; defaults to the identity.
        settings: Usage options; defaults to the global configuration.
        starts: Claimed key offsets.  Pass the same set to successive calls
                to de-duplicate across frameworks.

    Returns:
        Keys ordered by ascending start offset.
    """
    settings = settings or Settings.from_config()
    if settings.disable_path_parsing:
        dot_ending = True
    scopes = list(scopes or [])
    if namespace_delimiters is None:
        namespace_delimiters = DEFAULT_NAMESPACE_DELIMITERS
    if starts is None:
        starts = set()
    rewriter = rewriter or _identity_rewriter

    has_alias_aware_scope = any(s.alias_aware for s in scopes)
    keys: List[KeyInDocument] = []
    for occurrence in find_occurrences(text, matchers, has_alias_aware_scope):
        found = handle_occurrence(
            text,
            occurrence,
            dot_ending,
            rewrite_context,
            scopes,
            namespace_delimiters,
            settings.default_namespace,
            starts,
            rewriter,
        )
        if found:
            keys.append(found)

    logger.debug("Found %d key(s) with %d matcher(s)", len(keys), len(matchers))
    return sorted(keys, key=lambda k: k.start)

# src/keyscope/frameworks/base.py
"""
Abstract base for all framework adapters.

A framework knows how its translation calls look (usage matchers), which
documents it applies to, how to find namespace scopes in a document, and how
to turn a matched key into the canonical key.  The matching pipeline in
:mod:`keyscope.matcher` is written against this interface only.
"""
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from ..interfaces import ErrorReporter
from ..models import DEFAULT_NAMESPACE_DELIMITERS, RewriteKeyContext, ScopeRange
from ..patterns import MatcherTemplate, compile_matchers

logger = logging.getLogger(__name__)

# package.json sections consulted by :meth:`Framework.detect`
_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")


class Framework(ABC):
    """
    Abstract base class for framework adapters.

    Subclasses must implement :meth:`refactor_templates`; the remaining
    capabilities have generic defaults.
    """

    id: str = ""
    display: str = ""
    namespace_delimiters: Tuple[str, ...] = DEFAULT_NAMESPACE_DELIMITERS

    # Dependency names whose presence in package.json enables the framework
    detection_package_json: Sequence[str] = ()
    language_ids: Sequence[str] = ()
    usage_match_regex: Sequence[MatcherTemplate] = ()
    # JavaScript semantics: \w and \d match ASCII only
    matcher_flags: int = re.ASCII

    def __init__(self) -> None:
        self._matcher_cache: Dict[str, List[Pattern[str]]] = {}
        self._delimiters_regex = re.compile(
            "[" + "".join(re.escape(d) for d in self.namespace_delimiters) + "]"
        )

    # ── detection ──────────────────────────────────────────────────────────

    def detect(self, package_json: Mapping[str, Any]) -> bool:
        """Whether a ``package.json`` mapping declares one of our dependencies."""
        for section in _DEPENDENCY_SECTIONS:
            deps = package_json.get(section) or {}
            if any(name in deps for name in self.detection_package_json):
                return True
        return False

    def supports_language(self, language_id: str) -> bool:
        return language_id in self.language_ids

    # ── matching ───────────────────────────────────────────────────────────

    def get_usage_matchers(
        self,
        regex_key: str,
        reporter: Optional[ErrorReporter] = None,
    ) -> List[Pattern[str]]:
        """Compiled :attr:`usage_match_regex`, cached per key fragment."""
        cached = self._matcher_cache.get(regex_key)
        if cached is None:
            cached = compile_matchers(
                self.usage_match_regex, regex_key, reporter, self.matcher_flags
            )
            self._matcher_cache[regex_key] = cached
        return cached

    def get_scope_ranges(self, text: str, language_id: str) -> Optional[List[ScopeRange]]:
        """Scope ranges of *text*, or *None* when scopes do not apply."""
        return None

    # ── key rewriting ──────────────────────────────────────────────────────

    def to_dotted(self, key: str) -> str:
        """Replace every namespace delimiter in *key* with ``.``."""
        return self._delimiters_regex.sub(".", key)

    def has_explicit_namespace(self, key: str) -> bool:
        return any(d in key for d in self.namespace_delimiters)

    def rewrite_keys(
        self,
        key: str,
        source: str,
        context: Optional[RewriteKeyContext] = None,
    ) -> str:
        """Return the canonical form of *key*; the base adapter keeps it as is."""
        return key

    @abstractmethod
    def refactor_templates(self, keypath: str) -> List[str]:
        """
        Code snippets that reference *keypath*, for extraction and quick fixes.

        Args:
            keypath: Fully dotted key.

        Returns:
            Candidate insertion templates, most specific first.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"

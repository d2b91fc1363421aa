# src/keyscope/models.py
"""
Data models for keyscope.

This module defines the core data structures passed between scope discovery,
occurrence matching, scope resolution and key rewriting.

Classes:
    ScopeRange: A text region in which an alias implicitly prefixes a namespace
    RawOccurrence: A single matcher hit before scope resolution
    KeyInDocument: A resolved key and the span of its literal in the document
    RewriteKeyContext: Extra information handed to a framework's key rewriter
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

# Characters recognised as opening a string literal at a call-site
QUOTE_SYMBOLS = ('"', "'", "`")

# Default characters marking an explicit namespace inside a raw key
DEFAULT_NAMESPACE_DELIMITERS = (':', '/')

# Who is asking for a key to be rewritten
REWRITE_SOURCE_REFERENCE = "reference"
REWRITE_SOURCE_SOURCE = "source"
REWRITE_SOURCE_WRITE = "write"
REWRITE_KEY_SOURCES = (REWRITE_SOURCE_SOURCE, REWRITE_SOURCE_REFERENCE, REWRITE_SOURCE_WRITE)


@dataclass(frozen=True)
class ScopeRange:
    """
    A contiguous region of a document in which keys are implicitly namespaced.

    Attributes:
        start (int): Offset where the scope begins
        end (int): Offset where the scope ends (may equal document length)
        namespace (str): Namespace prepended to keys used inside the scope
        alias_name (Optional[str]): Translation-function alias bound by the
            declaration (e.g. ``t`` or ``tCommon``); ``None`` for scopes that
            apply to every alias
    """
    start: int
    end: int
    namespace: str
    alias_name: Optional[str] = None

    @property
    def alias_aware(self) -> bool:
        return self.alias_name is not None

    def contains(self, start: int, end: int) -> bool:
        return self.start <= start and self.end >= end


@dataclass(frozen=True)
class RawOccurrence:
    """One matcher hit: the matched text and the key literal it captured."""
    matched_text: str
    match_index: int
    captured_key: str
    alias_name: Optional[str] = None

    @property
    def key_start(self) -> int:
        """Document offset of the key literal (last occurrence inside the match)."""
        return self.match_index + self.matched_text.rfind(self.captured_key)

    @property
    def key_end(self) -> int:
        return self.key_start + len(self.captured_key)


@dataclass
class KeyInDocument:
    """
    A key usage found in a document.

    Attributes:
        key (str): Canonical dotted key
        start (int): Offset of the first character of the key literal
        end (int): Offset just past the key literal
        quoted (bool): Whether the literal directly follows a quote character
    """
    key: str
    start: int
    end: int
    quoted: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RewriteKeyContext:
    """Context for :meth:`Framework.rewrite_keys`; ``namespace`` is the active scope."""
    namespace: Optional[str] = None
    target_file: Optional[str] = None

# src/keyscope/frameworks/next_intl.py
"""
next-intl adapter.

Files may bind several translation functions to different namespaces::

    const t = useTranslations('common');
    const tAuth = await getTranslations('auth');

Each binding opens a scope from the declaration to the end of the file.  The
usage matchers capture the alias as group 1, so a key passed to ``tAuth`` is
resolved against the ``auth`` scope even where the ``common`` scope overlaps.
"""
import logging
import re
from typing import List, Optional

from ..models import REWRITE_SOURCE_REFERENCE, RewriteKeyContext, ScopeRange
from .base import Framework

logger = logging.getLogger(__name__)

_SCOPE_DECLARATION = re.compile(
    r"(?:const|let|var)\s+(t(?:[A-Z]\w*)?)\s*=\s*(?:await\s+)?"
    r"(useTranslations|getTranslations)\s*\(\s*['\"`](.*?)['\"`]\)",
    re.ASCII,
)


class NextIntlFramework(Framework):
    id = "next-intl"
    display = "next-intl"
    namespace_delimiters = (".",)

    detection_package_json = ("next-intl",)

    language_ids = (
        "javascript",
        "typescript",
        "javascriptreact",
        "typescriptreact",
        "ejs",
    )

    # Group 1 is the alias (t, tCommon, ...), group 2 the key
    usage_match_regex = (
        # t('key')
        r"[^\w\d](t(?:[A-Z]\w*)?)\s*\(\s*['\"`]({key})['\"`]",
        # t.rich('key')
        r"[^\w\d](t(?:[A-Z]\w*)?)\s*\.rich\s*\(\s*['\"`]({key})['\"`]",
        # t.markup('key')
        r"[^\w\d](t(?:[A-Z]\w*)?)\s*\.markup\s*\(\s*['\"`]({key})['\"`]",
        # t.raw('key')
        r"[^\w\d](t(?:[A-Z]\w*)?)\s*\.raw\s*\(\s*['\"`]({key})['\"`]",
    )

    def refactor_templates(self, keypath: str) -> List[str]:
        # The enclosing namespace is unknown here, so offer every suffix:
        # one.two.three -> three, two.three, one.two.three
        parts = keypath.split(".")
        keypaths = [".".join(parts[len(parts) - i - 1:]) for i in range(len(parts))]
        return [f"{{t('{p}')}}" for p in keypaths] + [f"t('{p}')" for p in keypaths]

    def rewrite_keys(
        self,
        key: str,
        source: str,
        context: Optional[RewriteKeyContext] = None,
    ) -> str:
        dotted_key = self.to_dotted(key)
        namespace = context.namespace if context else None

        # Keys written with an explicit namespace become relative to the
        # enclosing scope when inserted into code; lookups stay fully dotted.
        if (
            source != REWRITE_SOURCE_REFERENCE
            and namespace
            and self.has_explicit_namespace(key)
        ):
            prefix = self.to_dotted(namespace) + "."
            if dotted_key.startswith(prefix):
                return dotted_key[len(prefix):]

        return dotted_key

    def get_scope_ranges(self, text: str, language_id: str) -> Optional[List[ScopeRange]]:
        if not self.supports_language(language_id):
            return None

        # Repeated bindings produce overlapping scopes; the alias captured at
        # each call-site decides between them during resolution.
        ranges: List[ScopeRange] = []
        for match in _SCOPE_DECLARATION.finditer(text):
            alias, namespace = match.group(1), match.group(3)
            if namespace:
                ranges.append(ScopeRange(
                    start=match.start(),
                    end=len(text),
                    namespace=namespace,
                    alias_name=alias,
                ))
        logger.debug("next-intl: %d scope(s) found", len(ranges))
        return ranges

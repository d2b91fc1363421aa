# src/keyscope/patterns.py
"""
Usage-matcher compilation.

Matcher templates are either ready ``re.Pattern`` objects or strings holding
the ``{key}`` placeholder, which is replaced by the configured key fragment
before compiling.  A malformed template is reported and skipped; the rest of
the batch still compiles.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Pattern, Sequence, Union

from .i18n import t
from .interfaces import ErrorReporter

__all__ = [
    "KEY_PLACEHOLDER",
    "MatcherTemplate",
    "compile_matchers",
]

logger = logging.getLogger(__name__)

KEY_PLACEHOLDER = "{key}"

MatcherTemplate = Union[str, Pattern[str]]


def compile_matchers(
    templates: Sequence[MatcherTemplate],
    key_pattern: str,
    reporter: Optional[ErrorReporter] = None,
    flags: int = 0,
) -> List[Pattern[str]]:
    """
    Compile matcher templates in order.

    Args:
        templates: Strings containing ``{key}`` or precompiled patterns.
        key_pattern: Regular-expression fragment describing a key.
        reporter: Receives a diagnostic for each template that fails to
                  compile.  Defaults to :data:`keyscope.log.default_reporter`.
        flags: Extra ``re`` flags, combined with ``re.MULTILINE``.  Only
               applied to string templates.

    Returns:
        Compiled patterns, minus any that failed.
    """
    if reporter is None:
        from .log import default_reporter
        reporter = default_reporter

    compiled: List[Pattern[str]] = []
    for template in templates:
        if not isinstance(template, str):
            compiled.append(template)
            continue
        try:
            interpolated = template.replace(KEY_PLACEHOLDER, key_pattern)
            compiled.append(re.compile(interpolated, re.MULTILINE | flags))
        except re.error as e:
            reporter.report_error(
                t("prompt.error_on_parse_custom_regex", pattern=template), True
            )
            reporter.report_error(str(e), False)
    logger.debug("Compiled %d of %d matcher template(s)", len(compiled), len(templates))
    return compiled

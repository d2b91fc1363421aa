# src/keyscope/frameworks/__init__.py
"""
Framework adapters for keyscope.

Provides a unified factory for creating framework adapters and detecting
which ones a project uses from its ``package.json``.

Functions:
    create_framework: Factory that returns a Framework by id.
    available_frameworks: Ids accepted by :func:`create_framework`.
    detect_frameworks: Adapters whose dependencies appear in package.json.

Performance Note:
    Adapter classes are imported lazily; only the requested adapter's
    module is loaded.
"""
import logging
from typing import Any, Dict, List, Mapping, Type, TYPE_CHECKING

from .base import Framework

# Type-checking imports (not executed at runtime)
if TYPE_CHECKING:
    from .next_intl import NextIntlFramework

__all__ = [
    "Framework",
    "NextIntlFramework",
    "available_frameworks",
    "create_framework",
    "detect_frameworks",
]

logger = logging.getLogger(__name__)

# Lazy-loaded framework class cache
_framework_classes: Dict[str, Type[Framework]] = {}


def __getattr__(name: str) -> Type[Framework]:
    """Lazy import framework classes on first access."""
    if name == "NextIntlFramework":
        if "NextIntlFramework" not in _framework_classes:
            from .next_intl import NextIntlFramework
            _framework_classes["NextIntlFramework"] = NextIntlFramework
        return _framework_classes["NextIntlFramework"]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def available_frameworks() -> List[str]:
    """Framework ids accepted by :func:`create_framework`."""
    return ["next-intl"]


def create_framework(framework_id: str, **kwargs: Any) -> Framework:
    """
    Factory that instantiates the requested framework adapter.

    Args:
        framework_id: One of :func:`available_frameworks`.
        **kwargs: Forwarded to the adapter constructor.

    Returns:
        A new :class:`Framework` instance.

    Raises:
        ValueError: If *framework_id* is unrecognised.
    """
    _id = framework_id.strip().lower()

    if _id == "next-intl":
        from .next_intl import NextIntlFramework
        return NextIntlFramework(**kwargs)
    else:
        raise ValueError(
            f"Unknown framework '{_id}'. "
            f"Supported frameworks: {', '.join(available_frameworks())}"
        )


def detect_frameworks(package_json: Mapping[str, Any]) -> List[Framework]:
    """Instantiate every adapter whose dependencies appear in *package_json*."""
    detected: List[Framework] = []
    for framework_id in available_frameworks():
        framework = create_framework(framework_id)
        if framework.detect(package_json):
            detected.append(framework)
    logger.debug("Detected frameworks: %s", [f.id for f in detected])
    return detected

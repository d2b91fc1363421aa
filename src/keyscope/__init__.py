# src/keyscope/__init__.py
"""
keyscope - scope-aware i18n key usage finder.

This package locates translation-key call-sites in source text, resolves the
namespace scope each call-site belongs to, and normalises the key into the
canonical dotted form used for catalog lookup.

Main Components:
- models: Scope ranges, occurrences and resolved keys
- patterns: Compilation of usage-matcher templates
- matcher: Occurrence matching, scope resolution and de-duplication
- frameworks: Framework adapters (next-intl) and their registry
- scanner: Document and project scanning entry points
- config: Configuration management
- performance: Performance monitoring utilities
"""

__version__ = "1.0.0"
__author__ = "keyscope Team"
__description__ = "Scope-aware i18n key usage finder for source code"

from typing import Optional, Protocol

from .models import RewriteKeyContext


class ErrorReporter(Protocol):
    def report_error(self, message: str, notify_user: bool = False) -> None:
        ...


class KeyRewriter(Protocol):
    def __call__(self, key: str, source: str, context: Optional[RewriteKeyContext] = None) -> str:
        ...

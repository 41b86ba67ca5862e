"""BaseService — foundation for services that work on the record store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from payledger.domain.types import InputError, error_message
from payledger.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from payledger.infrastructure.store import RecordStore


class BaseService:
    """Base for service-layer classes.

    Every service receives the process-wide :class:`RecordStore` at
    construction time and never creates one of its own.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    @staticmethod
    def _fail(op: str, code: InputError, **detail: Any) -> ServiceResult:
        """Build a failed result whose message is the console text for *code*."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code.value, message=error_message(code), detail=detail),
        )

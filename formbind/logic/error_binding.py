"""Error-state class binding for form controls.

The binder emits a conditional class template that references the form's live
error flag for a field. It never asks the lookup whether the field currently
has an error; the client runtime re-evaluates the template whenever
validation state changes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Protocol, runtime_checkable
import logging

from formbind.models.binding import ErrorClassBinding

logger = logging.getLogger(__name__)

DEFAULT_ERROR_CLASS = "error"
DEFAULT_ERRORS_REF = "parentFormErrors"


@runtime_checkable
class ErrorLookup(Protocol):
    @property
    def error_class_name(self) -> str: ...

    def has_error(self, attr_key: str) -> bool: ...

    def error_flag_reference(self, attr_key: str) -> str: ...


class FormErrorLookup:
    """In-memory error lookup for one form.

    Writes replace the whole error map so readers always observe a complete
    snapshot without locking.
    """

    def __init__(
        self,
        errors: Mapping[str, Iterable[str]] | None = None,
        *,
        error_class_name: str = DEFAULT_ERROR_CLASS,
        errors_ref: str = DEFAULT_ERRORS_REF,
    ) -> None:
        self._error_class_name = error_class_name
        self._errors_ref = errors_ref
        self._errors: Mapping[str, tuple] = MappingProxyType({})
        self.set_errors(errors or {})

    @property
    def error_class_name(self) -> str:
        return self._error_class_name

    def has_error(self, attr_key: str) -> bool:
        return bool(self._errors.get(attr_key))

    def error_flag_reference(self, attr_key: str) -> str:
        return f"{self._errors_ref}['{attr_key}']"

    def messages_for(self, attr_key: str) -> List[str]:
        return list(self._errors.get(attr_key, ()))

    def set_errors(self, errors: Mapping[str, Iterable[str]]) -> None:
        snapshot: Dict[str, tuple] = {}
        for key, messages in errors.items():
            msgs = (messages,) if isinstance(messages, str) else tuple(messages or ())
            if msgs:
                snapshot[str(key)] = msgs
        self._errors = MappingProxyType(snapshot)

    def add_error(self, attr_key: str, message: str) -> None:
        current = dict(self._errors)
        current[attr_key] = tuple(current.get(attr_key, ())) + (message,)
        self._errors = MappingProxyType(current)

    def clear(self, attr_key: str | None = None) -> None:
        if attr_key is None:
            self._errors = MappingProxyType({})
            return
        current = dict(self._errors)
        current.pop(attr_key, None)
        self._errors = MappingProxyType(current)


def error_binding(attr_key: str, error_lookup: ErrorLookup) -> ErrorClassBinding:
    """Return the conditional class binding for attr_key.

    Raises TypeError when no lookup is supplied; that is an integration error.
    """
    if error_lookup is None:
        raise TypeError("error_lookup is required to bind error state")
    binding = ErrorClassBinding(
        attr_key=attr_key,
        class_name=error_lookup.error_class_name,
        flag_reference=error_lookup.error_flag_reference(attr_key),
    )
    logger.debug("select_error_binding key=%s template=%s", attr_key, binding.render())
    return binding


__all__ = [
    "DEFAULT_ERROR_CLASS",
    "DEFAULT_ERRORS_REF",
    "ErrorLookup",
    "FormErrorLookup",
    "error_binding",
]

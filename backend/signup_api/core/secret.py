"""Redacting wrapper for credential material.

A :class:`Secret` keeps the raw value in memory only. Every default rendering
path (``str``, ``repr``, ``format``, JSON, pickling) either redacts the value
or refuses to run, so a password can be passed through logs and error messages
without leaking. Callers that genuinely need the plaintext use
:meth:`Secret.reveal`.
"""

from __future__ import annotations

from typing import Any, Final

REDACTED: Final[str] = "[REDACTED]"
REDACTED_JSON: Final[str] = "***redacted***"


class Secret:
    """Opaque holder for a sensitive string.

    :param value: Raw secret value.
    :type value: str
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Secret value must be a string.")
        self._value = value

    def reveal(self) -> str:
        """Return the raw secret value. Guard access carefully.

        :returns: Plaintext value.
        :rtype: str
        """
        return self._value

    def __str__(self) -> str:
        return REDACTED

    def __repr__(self) -> str:
        return f"Secret({REDACTED!r})"

    def __format__(self, format_spec: str) -> str:
        return format(REDACTED, format_spec)

    def __copy__(self) -> Secret:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Secret:
        return self

    def __reduce__(self) -> Any:
        raise TypeError("Secret values cannot be pickled.")


__all__ = ["REDACTED", "REDACTED_JSON", "Secret"]

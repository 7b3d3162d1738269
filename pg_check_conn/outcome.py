"""
Probe Outcome Module
Result values of a single connection attempt and the exit code each maps to.
"""

from dataclasses import dataclass
from typing import Optional, Union

# Exit status for internal errors and attempts that produced no handle
INTERNAL_ERROR_EXIT = -1


@dataclass(frozen=True)
class Success:
    """The server accepted the connection."""

    @property
    def exit_code(self) -> int:
        return 0


@dataclass(frozen=True)
class Failure:
    """
    The connection attempt was rejected or could not be completed.

    ``status_code`` is the libpq connection status of the handle, or None
    when libpq could not allocate a handle at all.
    """

    message: str
    status_code: Optional[int] = None

    @property
    def exit_code(self) -> int:
        if self.status_code is None:
            return INTERNAL_ERROR_EXIT
        return self.status_code


@dataclass(frozen=True)
class InternalError:
    """Something went wrong before or around the attempt itself."""

    message: str

    @property
    def exit_code(self) -> int:
        return INTERNAL_ERROR_EXIT


Outcome = Union[Success, Failure, InternalError]

"""
Print Result Model
==================

Outcome of a print submission as reported to the caller.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..config import SUCCESS_MESSAGE
from ..errors import PrintError


@dataclass(frozen=True)
class PrintResult:
    """Print outcome. Returned to the caller, never stored."""

    success: bool
    message: str

    @classmethod
    def ok(cls) -> 'PrintResult':
        return cls(success=True, message=SUCCESS_MESSAGE)

    @classmethod
    def from_error(cls, error: PrintError) -> 'PrintResult':
        return cls(success=False, message=str(error))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {'Success': self.success, 'Message': self.message}

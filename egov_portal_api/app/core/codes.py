"""
Generation of human-readable record codes.

Codes are a fixed prefix, optionally the current year, and a numeric
sequence: ``HS2026000123`` for applications, ``LH00004567`` for
appointments and so on.  Each ``CodeGenerator`` owns a monotonic
counter that is advanced under a lock, so two requests never receive
the same number from one generator.  The counter starts from the
current time in milliseconds, keeping codes from different process
runs apart.  Before a code is issued it is checked against its
registry through the ``exists`` callback; taken codes (seed records,
for instance) are skipped.
"""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime
from typing import Callable, Optional

from .errors import DuplicateCodeError


logger = logging.getLogger(__name__)


class CodeGenerator:
    """Issue unique prefixed codes for one kind of record.

    Parameters
    ----------
    prefix : str
        Leading letters, e.g. ``"HS"``.
    digits : Optional[int]
        Width of the zero-padded sequence part.  The sequence wraps
        around at ``10 ** digits``.  ``None`` means no padding and no
        wrap-around.
    with_year : bool
        Insert the four-digit current year between prefix and sequence.
    exists : Optional[Callable[[str], bool]]
        Returns ``True`` when a code is already taken.
    max_attempts : int
        How many consecutive taken codes to skip before giving up.
    start : Optional[int]
        First sequence value; defaults to the current time in
        milliseconds.
    """

    def __init__(
        self,
        prefix: str,
        digits: Optional[int] = None,
        with_year: bool = False,
        exists: Optional[Callable[[str], bool]] = None,
        max_attempts: int = 20,
        start: Optional[int] = None,
    ) -> None:
        self.prefix = prefix
        self.digits = digits
        self.with_year = with_year
        self.exists = exists
        self.max_attempts = max_attempts
        self._modulus = 10 ** digits if digits else None
        seq = start if start is not None else int(time.time() * 1000)
        self._seq = seq % self._modulus if self._modulus else seq
        self._lock = threading.Lock()

    def _format(self, seq: int) -> str:
        number = str(seq).zfill(self.digits) if self.digits else str(seq)
        year = str(datetime.now().year) if self.with_year else ""
        return f"{self.prefix}{year}{number}"

    def _advance(self) -> int:
        seq = self._seq
        self._seq = seq + 1
        if self._modulus:
            self._seq %= self._modulus
        return seq

    def next_code(self) -> str:
        """Return a code that is not taken at the time of the call.

        Raises
        ------
        DuplicateCodeError
            If ``max_attempts`` consecutive candidates are all taken.
        """
        with self._lock:
            for _ in range(self.max_attempts):
                code = self._format(self._advance())
                if self.exists is None or not self.exists(code):
                    return code
                logger.warning("Code %s is already taken, trying the next one", code)
        raise DuplicateCodeError()

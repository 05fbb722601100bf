from typing import Protocol
from datetime import datetime


class Clock(Protocol):
    def now(self) -> datetime:
        """Current time as a naive UTC datetime."""
        ...


class RandomSource(Protocol):
    def digits(self, length: int) -> str:
        ...

    def token_hex(self, nbytes: int) -> str:
        ...

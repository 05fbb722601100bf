import secrets
from datetime import datetime, timezone

from ...application.ports.clock import Clock, RandomSource


class SystemClock(Clock):
    def now(self) -> datetime:
        # Stored columns are naive UTC
        return datetime.now(timezone.utc).replace(tzinfo=None)


class SecretsRandomSource(RandomSource):
    def digits(self, length: int) -> str:
        # Uniform over 0 .. 10**length - 1, zero padded
        return str(secrets.randbelow(10 ** length)).zfill(length)

    def token_hex(self, nbytes: int) -> str:
        return secrets.token_hex(nbytes)

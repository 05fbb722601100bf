from typing import Protocol


class UnitOfWork(Protocol):
    """Repository writes are staged until commit; rollback discards them."""

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

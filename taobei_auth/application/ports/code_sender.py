from typing import Protocol


class CodeSender(Protocol):
    def send(self, phone: str, code: str) -> None:
        ...

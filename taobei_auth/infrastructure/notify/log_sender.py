import logging

from ...application.ports.code_sender import CodeSender


class LogCodeSender(CodeSender):
    """Stands in for an SMS gateway: the code goes to the operator log."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def send(self, phone: str, code: str) -> None:
        self._logger.info(f"Verification code for {phone} is {code}")

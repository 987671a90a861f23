from typing import Optional


class WikibaseError(Exception):
    pass


class DisallowedIpEditError(WikibaseError):
    """Raised for edits without authentication while IP edits are disallowed."""

    def __init__(self) -> None:
        super().__init__(
            "No authentication provided. If you want to perform unauthenticated edits "
            "and are comfortable exposing your IP address publicly, set "
            "`allow_ip_edits=True` when instantiating your client with `Client(...)`."
        )


class DisallowedBotEditError(WikibaseError):
    """Raised for unauthenticated edits flagged as bot edits, which the API rejects with a 403."""

    def __init__(self) -> None:
        super().__init__(
            "No authentication provided, but attempted to edit as a bot. You cannot make "
            "edits as a bot unless you have authenticated as a user with the Bot flag."
        )


class ApiError(WikibaseError):
    status: int
    code: Optional[str]
    info: str

    def __init__(self, status: int, code: Optional[str], info: str):
        self.status = status
        self.code = code
        self.info = info
        super().__init__(f"[{status}] {code or 'http-error'}: {info}")

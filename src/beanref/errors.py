from __future__ import annotations


class NamingError(Exception):
    pass


class UnmatchedURLError(NamingError):
    def __init__(self, url: str) -> None:
        super().__init__(f"can't match URL {url!r} to a valid resource identifier")
        self.url = url


class ConfigurationError(NamingError):
    pass

# errors.py

from __future__ import annotations


class CatalogError(Exception):
    pass


class CatalogFetchError(CatalogError):
    """
    A catalog collection could not be loaded.

    The whole catalog load is aborted; callers get no partial catalog.
    """

    def __init__(self, message: str, *, resource: str, url: str):
        super().__init__(message)
        self.resource = resource
        self.url = url

    def __str__(self) -> str:
        return f"{self.resource}: {self.args[0]} ({self.url})"


class NetworkError(CatalogFetchError):
    pass


class HTTPStatusError(CatalogFetchError):
    def __init__(self, message: str, *, resource: str, url: str, status_code: int):
        super().__init__(message, resource=resource, url=url)
        self.status_code = status_code


class DecodeError(CatalogFetchError):
    pass


class ImageResolutionError(CatalogError):
    def __init__(self, message: str, *, link: str):
        super().__init__(message)
        self.link = link

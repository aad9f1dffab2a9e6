from typing import Protocol

from fastapi import Response

TODO_VIEWS = ("/dashboard/todos", "/dashboard")


class ViewRefresher(Protocol):
    def refresh(self, *paths: str) -> None: ...


class HeaderViewRefresher:
    """Tells the client which views to refetch via a response header."""

    header = "X-Revalidate"

    def __init__(self, response: Response):
        self.response = response
        self.paths: list[str] = []

    def refresh(self, *paths: str) -> None:
        for path in paths:
            if path not in self.paths:
                self.paths.append(path)
        self.response.headers[self.header] = ", ".join(self.paths)

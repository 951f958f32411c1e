from __future__ import annotations

import httpx

API = "https://api.github.com"
RAW = "https://raw.githubusercontent.com"


class FakeGitHub:
    """Routes requests by URL to canned responses and records what was asked."""

    def __init__(self) -> None:
        self.routes: dict[str, httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add_json(self, url: str, payload, status_code: int = 200, headers=None) -> None:
        self.routes[url] = httpx.Response(status_code, json=payload, headers=headers)

    def add_bytes(self, url: str, content: bytes, status_code: int = 200) -> None:
        self.routes[url] = httpx.Response(status_code, content=content)

    def add_error(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        route = self.routes.get(key)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        return route

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


def file_entry(path: str, download_url: str | None = None) -> dict:
    name = path.rsplit("/", 1)[-1]
    return {
        "type": "file",
        "name": name,
        "path": path,
        "sha": "0" * 40,
        "size": 1,
        "download_url": download_url if download_url is not None else f"{RAW}/acme/widgets/main/{path}",
    }


def dir_entry(path: str) -> dict:
    return {
        "type": "dir",
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "sha": "1" * 40,
        "size": 0,
        "download_url": None,
    }

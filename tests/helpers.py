from __future__ import annotations

from typing import Any, Callable, Dict, List

import httpx


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Recorder:
    """
    Wraps a MockTransport handler and keeps every request it saw.
    """

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.handler = handler
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resp = self.handler(request)
        if hasattr(resp, "__await__"):
            resp = await resp
        return resp

    @property
    def calls(self) -> int:
        return len(self.requests)


def chat_reply(content: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]})


def recipe_record(recipe_id: int, title: str, **extra: Any) -> Dict[str, Any]:
    record = {
        "id": recipe_id,
        "title": title,
        "image": f"https://img.spoonacular.com/recipes/{recipe_id}-312x231.jpg",
        "imageType": "jpg",
    }
    record.update(extra)
    return record


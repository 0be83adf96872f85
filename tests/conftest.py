"""Pytest configuration for workout demo tests."""

import json

import httpx
import pytest

from services import Settings


def serper_video(title, channel, link, thumbnail="https://i.ytimg.com/t.jpg", duration="3:21"):
    return {"title": title, "channel": channel, "link": link, "imageUrl": thumbnail, "duration": duration}


def exercise_from_query(query: str) -> str:
    for suffix in (" exercise tutorial proper form", " exercise logo icon fitness"):
        if query.endswith(suffix):
            return query[: -len(suffix)]
    return query


class FakeSerper:
    """In-memory Serper backend keyed by exercise name."""

    def __init__(self, videos=None, images=None, failing=()):
        self.videos = videos or {}
        self.images = images or {}
        self.failing = set(failing)
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append((request.url.path, body, dict(request.headers)))
        exercise = exercise_from_query(body["q"])
        if exercise in self.failing:
            return httpx.Response(500, json={"message": "boom"})
        if request.url.path == "/videos":
            return httpx.Response(200, json={"videos": self.videos.get(exercise, [])})
        if request.url.path == "/search":
            return httpx.Response(200, json={"images": self.images.get(exercise, [])})
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def queries(self, path: str):
        return [exercise_from_query(body["q"]) for p, body, _ in self.requests if p == path]


@pytest.fixture
def settings():
    return Settings(groq_api_key="gsk-test", serper_api_key="serper-test")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GROQ_API_KEY", "SERPER_API_KEY", "YOUTUBE_API_KEY", "GROQ_BASE_URL", "GROQ_MODEL",
                 "VIDEO_SEARCH_BACKEND", "MAX_EXERCISES", "MAX_CONCURRENT_LOOKUPS", "HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_video():
    return serper_video


@pytest.fixture
def fake_serper():
    return FakeSerper

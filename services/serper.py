"""
Serper (google.serper.dev) search client.

Two endpoints are used: /videos for exercise demonstrations and /search with
type=images for card thumbnails. Both take a JSON body and an X-API-KEY header.
"""

from typing import List

import httpx

from models import VideoCandidate, ImageResult
from models.youtube import DEFAULT_CHANNEL_NAME
from .config import Settings

SERPER_VIDEOS_URL = "https://google.serper.dev/videos"
SERPER_SEARCH_URL = "https://google.serper.dev/search"

SEARCH_REGION = "us"
SEARCH_LANGUAGE = "en"
SEARCH_RESULT_COUNT = 5

VIDEO_QUERY_TEMPLATE = "{exercise} exercise tutorial proper form"
LOGO_QUERY_TEMPLATE = "{exercise} exercise logo icon fitness"


def make_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.http_timeout)


async def _post(client: httpx.AsyncClient, url: str, payload: dict, api_key: str) -> dict:
    response = await client.post(
        url,
        json=payload,
        headers={"Content-Type": "application/json", "X-API-KEY": api_key},
    )
    # Non-2xx counts as a failed request; callers decide what that means
    response.raise_for_status()
    return response.json()


def _parse_videos(data: dict) -> List[VideoCandidate]:
    videos = []
    for item in data.get("videos") or []:
        # Keep link-less results so selection still sees the API order
        videos.append(VideoCandidate(
            title=item.get("title") or "",
            thumbnail=item.get("imageUrl") or item.get("thumbnail") or "",
            channel_name=item.get("channel") or item.get("channelName") or DEFAULT_CHANNEL_NAME,
            link=item.get("link") or "",
            duration=item.get("duration") or "",
        ))
    return videos


def _parse_images(data: dict) -> List[ImageResult]:
    return [
        ImageResult(title=item.get("title") or "", image_url=item["imageUrl"])
        for item in data.get("images") or []
        if item.get("imageUrl")
    ]


async def search_videos(client: httpx.AsyncClient, exercise: str, settings: Settings) -> List[VideoCandidate]:
    """Search Serper videos for a demonstration of `exercise`, in API order."""
    query = VIDEO_QUERY_TEMPLATE.format(exercise=exercise)
    payload = {"q": query, "gl": SEARCH_REGION, "hl": SEARCH_LANGUAGE, "num": SEARCH_RESULT_COUNT}
    data = await _post(client, SERPER_VIDEOS_URL, payload, settings.require("serper_api_key"))
    videos = _parse_videos(data)
    print(f"[serper] videos q='{query}' -> {len(videos)} results")
    return videos


async def search_images(client: httpx.AsyncClient, exercise: str, settings: Settings) -> List[ImageResult]:
    query = LOGO_QUERY_TEMPLATE.format(exercise=exercise)
    payload = {"q": query, "gl": SEARCH_REGION, "hl": SEARCH_LANGUAGE, "num": SEARCH_RESULT_COUNT,
               "type": "images"}
    data = await _post(client, SERPER_SEARCH_URL, payload, settings.require("serper_api_key"))
    images = _parse_images(data)
    print(f"[serper] images q='{query}' -> {len(images)} results")
    return images

import re
import asyncio
from typing import List, Optional, Sequence

from googleapiclient.errors import HttpError
from googleapiclient.discovery import build

from models import VideoCandidate, ImageResult
from models.youtube import YOUTUBE_WATCH_URL_TEMPLATE, DEFAULT_CHANNEL_NAME
from .config import Settings

# Accepts .../watch?v=<id> and the youtu.be/<id> short form
VIDEO_ID_RE = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&]+)")

# Well-known fitness channels, preferred over whatever the search ranks first.
# Matched as case-sensitive substrings of the channel name returned by the API.
PREFERRED_CHANNELS = (
    "ATHLEAN-X", "Jeremy Ethier", "Jeff Nippard", "FitnessBlender", "Buff Dudes",
    "THENX", "Bodybuilding.com", "Calisthenicmovement", "Fitness FAQs",
)

LOGO_TITLE_KEYWORDS = ("icon", "logo", "transparent", "isolated", "exercise")


def extract_video_id(link: str) -> Optional[str]:
    m = VIDEO_ID_RE.search(link or "")
    return m.group(1) if m else None

def is_preferred_channel(channel_name: str) -> bool:
    channel_name = channel_name or ""
    return any(channel in channel_name for channel in PREFERRED_CHANNELS)

def select_best_video(videos: Sequence[VideoCandidate]) -> Optional[VideoCandidate]:
    """First video from a preferred channel, else the first video, else None."""
    for video in videos:
        if is_preferred_channel(video.channel_name):
            return video
    return videos[0] if videos else None

def select_logo(images: Sequence[ImageResult]) -> Optional[str]:
    """Image URL whose title looks like an icon/logo, falling back to the first image."""
    for image in images:
        title = (image.title or "").lower()
        if any(k in title for k in LOGO_TITLE_KEYWORDS):
            return image.image_url
    return images[0].image_url if images else None

# ----- YouTube Data API (alternative video search backend) -----
_yt_client = None
_yt_client_key = None
def _get_yt_client(settings: Settings):
    global _yt_client, _yt_client_key
    youtube_api_key = settings.require("youtube_api_key")
    if not _yt_client or _yt_client_key != youtube_api_key:
        _yt_client = build("youtube", "v3", developerKey=youtube_api_key, static_discovery=False,
                            cache_discovery=False)
        _yt_client_key = youtube_api_key
    return _yt_client

def _snippet_to_candidate(item: dict) -> Optional[VideoCandidate]:
    vid = (item.get("id") or {}).get("videoId")
    if not vid:
        return None
    snippet = item.get("snippet") or {}
    thumbs = snippet.get("thumbnails") or {}
    thumb = (thumbs.get("high") or thumbs.get("medium") or thumbs.get("default") or {}).get("url", "")
    return VideoCandidate(
        title=snippet.get("title", ""),
        thumbnail=thumb,
        channel_name=snippet.get("channelTitle") or DEFAULT_CHANNEL_NAME,
        link=YOUTUBE_WATCH_URL_TEMPLATE.format(video_id=vid),
    )

def search_videos_youtube(query: str, settings: Settings, max_results: int = 5) -> List[VideoCandidate]:
    """Same contract as the Serper video search, answered by the YouTube Data API."""
    print(f"[yt] search q='{query}' max_results={max_results}")
    yt_client = _get_yt_client(settings)
    try:
        resp = yt_client.search().list(
            part="snippet",
            type="video",
            q=query,
            maxResults=max_results,
            order="relevance",
            regionCode="US",
            relevanceLanguage="en",
        ).execute()
    except HttpError as e:
        if getattr(e, "resp", None) and e.resp.status == 403 and b"quota" in getattr(e, "content", b"").lower():
            print("[yt] quota exceeded")
        raise
    videos = [c for c in (_snippet_to_candidate(item) for item in resp.get("items", [])) if c]
    print(f"[yt] search returned {len(videos)} videos")
    return videos

async def search_videos_youtube_async(query: str, settings: Settings, max_results: int = 5) -> List[VideoCandidate]:
    # googleapiclient is blocking; keep it off the event loop
    return await asyncio.to_thread(search_videos_youtube, query, settings, max_results)

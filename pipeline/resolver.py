from typing import List, Optional

import httpx

from models import VideoCandidate, ResolvedExercise, Resolution
from services import (Settings, search_videos, search_images, select_best_video, select_logo,
    extract_video_id, search_videos_youtube_async)
from services.serper import VIDEO_QUERY_TEMPLATE, SEARCH_RESULT_COUNT


async def find_videos(client: httpx.AsyncClient, exercise: str, settings: Settings) -> List[VideoCandidate]:
    if settings.video_search_backend == "youtube":
        query = VIDEO_QUERY_TEMPLATE.format(exercise=exercise)
        return await search_videos_youtube_async(query, settings, max_results=SEARCH_RESULT_COUNT)
    return await search_videos(client, exercise, settings)


async def fetch_logo(client: httpx.AsyncClient, exercise: str, settings: Settings) -> Optional[str]:
    """Better card thumbnail for `exercise`; any failure just means no override."""
    try:
        images = await search_images(client, exercise, settings)
    except Exception as e:
        print(f"[resolve] logo lookup failed for '{exercise}': {e}")
        return None
    return select_logo(images)


async def resolve_exercise(exercise: str, client: httpx.AsyncClient, settings: Settings) -> Resolution:
    """
    Find one demonstration video for `exercise`.

    Never raises: request and parse failures come back as a no-match
    Resolution so one bad lookup cannot sink the rest of the batch.
    """
    try:
        videos = await find_videos(client, exercise, settings)
    except Exception as e:
        print(f"[resolve] video search failed for '{exercise}': {e}")
        return Resolution.no_match(exercise, f"request failed: {e}")

    if not videos:
        print(f"[resolve] no videos for '{exercise}'")
        return Resolution.no_match(exercise, "no videos")

    best = select_best_video(videos)
    video_id = extract_video_id(best.link)
    if not video_id:
        print(f"[resolve] unrecognised link for '{exercise}': {best.link}")
        return Resolution.no_match(exercise, "unrecognised link")

    video = best.model_copy(update={"video_id": video_id})
    logo_url = await fetch_logo(client, exercise, settings)
    print(f"[resolve] '{exercise}' -> {video_id} ({video.channel_name}) logo={'yes' if logo_url else 'no'}")
    return Resolution(exercise=exercise, resolved=ResolvedExercise(exercise=exercise, video=video, logo_url=logo_url))

import asyncio
from typing import Optional, Sequence

import httpx

from models import ResultSet, PipelineRun, ResolvedExercise, ModalView, EmptyExtractionError
from models.youtube import YOUTUBE_EMBED_URL_TEMPLATE, YOUTUBE_WATCH_URL_TEMPLATE
from services import (Settings, load_settings, make_client, validate_document, extract_text,
    extract_exercises)
from .resolver import resolve_exercise

NO_EXERCISES_MESSAGE = ("No exercises found in the PDF. Please make sure you uploaded a "
                        "workout plan PDF.")


# ----- Resolution -----
async def resolve_all(exercises: Sequence[str], settings: Optional[Settings] = None,
                      client: Optional[httpx.AsyncClient] = None) -> ResultSet:
    """
    Resolve up to settings.max_exercises names concurrently, at most
    settings.max_concurrent_lookups at a time. Unmatched names are dropped;
    the rest keep their input order. An empty ResultSet is a valid outcome.
    """
    settings = settings or load_settings()
    attempted = list(exercises)[:settings.max_exercises]
    print(f"[orchestrate] resolving {len(attempted)} of {len(exercises)} exercises "
          f"(concurrency={settings.max_concurrent_lookups})")
    if not attempted:
        return ResultSet(items=[], attempted=[])

    # Fail once up front instead of once per exercise
    if settings.video_search_backend == "youtube":
        settings.require("youtube_api_key")
    else:
        settings.require("serper_api_key")

    own_client = client is None
    http = client if client is not None else make_client(settings)
    semaphore = asyncio.Semaphore(settings.max_concurrent_lookups)

    async def _bounded(name: str):
        async with semaphore:
            return await resolve_exercise(name, http, settings)

    try:
        # gather keeps input order even though lookups finish out of order
        resolutions = await asyncio.gather(*(_bounded(name) for name in attempted))
    finally:
        if own_client:
            await http.aclose()

    items = [r.resolved for r in resolutions if r.matched]
    print(f"[orchestrate] {len(items)} of {len(attempted)} exercises matched a video")
    return ResultSet(items=items, attempted=attempted)


async def run_pipeline(pdf_path: str, settings: Optional[Settings] = None) -> PipelineRun:
    """PDF -> exercise names -> demonstration videos."""
    settings = settings or load_settings()
    print(f"[pipeline] start pdf={pdf_path}")
    validate_document(pdf_path)
    # PyMuPDF and the OpenAI client are blocking; keep them off the event loop
    text = await asyncio.to_thread(extract_text, pdf_path)
    exercises = await asyncio.to_thread(extract_exercises, text, settings=settings)
    if not exercises:
        raise EmptyExtractionError(NO_EXERCISES_MESSAGE)
    results = await resolve_all(exercises, settings=settings)
    print(f"[pipeline] done exercises={len(exercises)} videos={len(results)}")
    return PipelineRun(exercises=exercises, results=results)


# ----- Modal lookup -----
def find_video(results: ResultSet, video_id: str) -> Optional[ResolvedExercise]:
    """The ResolvedExercise playing `video_id`, or None when it is not in this run."""
    if results is None or not video_id:
        return None
    return results.find_by_video_id(video_id)


def describe_modal(results: ResultSet, video_id: str, exercise: Optional[str] = None) -> Optional[ModalView]:
    """
    Detail view for one card. `exercise` is the label the card was showing;
    without it an unknown video_id yields None.
    """
    found = find_video(results, video_id)
    if found is None and exercise is None:
        return None
    channel = found.video.channel_name if found else ""
    return ModalView(
        video_id=video_id,
        title=f"{exercise if exercise is not None else found.exercise} - Demo",
        embed_url=YOUTUBE_EMBED_URL_TEMPLATE.format(video_id=video_id),
        watch_url=YOUTUBE_WATCH_URL_TEMPLATE.format(video_id=video_id),
        channel_info=f"From: {channel}" if channel else "",
    )

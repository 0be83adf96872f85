import asyncio
import sys
from typing import List, Optional

from dotenv import load_dotenv
load_dotenv()

from models import ResultSet, ModalView, WorkoutDemosError
from pipeline import run_pipeline, describe_modal
from services import load_settings

USAGE = "Usage: python app.py <WORKOUT_PLAN.pdf> [--open VIDEO_ID]"

NO_VIDEOS_TEXT = ("No Videos Found\n"
                  "We couldn't find any videos for the exercises in your workout plan. "
                  "Please try a different PDF.")


def render_cards(results: ResultSet) -> str:
    if results.is_empty:
        return NO_VIDEOS_TEXT
    lines = []
    for idx, item in enumerate(results.items, start=1):
        video = item.video
        lines.append(f"{idx:>2}. {item.exercise}")
        lines.append(f"    channel:   {video.channel_name}")
        if video.duration:
            lines.append(f"    duration:  {video.duration}")
        lines.append(f"    thumbnail: {item.thumbnail_url}")
        lines.append(f"    watch:     {video.watch_url}  [video_id={video.video_id}]")
    return "\n".join(lines)


def render_modal(view: ModalView) -> str:
    lines = [view.title, f"  embed: {view.embed_url}", f"  open:  {view.watch_url}"]
    if view.channel_info:
        lines.insert(1, f"  {view.channel_info}")
    return "\n".join(lines)


def render_error(message: str) -> str:
    return f"[error] {message}"


def _parse_args(argv: List[str]) -> Optional[tuple]:
    args = list(argv)
    open_id = None
    if "--open" in args:
        i = args.index("--open")
        if i + 1 >= len(args):
            return None
        open_id = args[i + 1]
        del args[i:i + 2]
    if len(args) != 1:
        return None
    return args[0], open_id


async def process(pdf_path: str, open_id: Optional[str] = None) -> int:
    try:
        settings = load_settings()
        run = await run_pipeline(pdf_path, settings=settings)
    except ValueError as e:
        # missing or malformed configuration
        print(render_error(str(e)))
        return 1
    except WorkoutDemosError as e:
        print(f"[main] pipeline failed: {e.detail or e.message}")
        print(render_error(e.message))
        return 1
    print(f"[main] {len(run.exercises)} exercises extracted")
    print(render_cards(run.results))
    if open_id:
        view = describe_modal(run.results, open_id)
        if view is None:
            print(render_error(f"Video {open_id} is not part of these results."))
            return 1
        print(render_modal(view))
    return 0


def main(argv: List[str]) -> int:
    parsed = _parse_args(argv)
    if parsed is None:
        print(USAGE)
        return 1
    pdf_path, open_id = parsed
    print(f"[main] pdf={pdf_path}")
    return asyncio.run(process(pdf_path, open_id))


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

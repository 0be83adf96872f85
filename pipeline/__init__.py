from .resolver import resolve_exercise, find_videos, fetch_logo
from .orchestrator import resolve_all, run_pipeline, find_video, describe_modal

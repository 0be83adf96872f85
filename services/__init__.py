from .config import Settings, load_settings, MAX_EXERCISES, MAX_CONCURRENT_LOOKUPS
from .pdf import validate_document, extract_text, extract_text_from_bytes
from .openai import extract_exercises, parse_exercise_list, clean_exercise_names
from .serper import make_client, search_videos, search_images
from .youtube import (extract_video_id, select_best_video, select_logo, is_preferred_channel,
    search_videos_youtube_async)

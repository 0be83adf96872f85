from pydantic import BaseModel, ConfigDict

YOUTUBE_WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"
YOUTUBE_EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}?autoplay=1&rel=0&modestbranding=1"
DEFAULT_CHANNEL_NAME = "YouTube Channel"


class VideoCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    thumbnail: str = ""
    channel_name: str = DEFAULT_CHANNEL_NAME
    link: str = ""
    video_id: str = ""  # filled in once the link has been matched
    duration: str = ""

    @property
    def watch_url(self) -> str:
        return YOUTUBE_WATCH_URL_TEMPLATE.format(video_id=self.video_id)

    @property
    def embed_url(self) -> str:
        return YOUTUBE_EMBED_URL_TEMPLATE.format(video_id=self.video_id)


class ImageResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    image_url: str

from typing import List, Optional
from pydantic import BaseModel, Field

from .youtube import VideoCandidate


class ResolvedExercise(BaseModel):
    exercise: str
    video: VideoCandidate
    logo_url: Optional[str] = None  # image-search override for the card thumbnail

    @property
    def thumbnail_url(self) -> str:
        return self.logo_url or self.video.thumbnail


class Resolution(BaseModel):
    """Outcome of resolving one exercise: either a match or a short no-match reason."""
    exercise: str
    resolved: Optional[ResolvedExercise] = None
    reason: str = ""

    @property
    def matched(self) -> bool:
        return self.resolved is not None

    @classmethod
    def no_match(cls, exercise: str, reason: str) -> "Resolution":
        return cls(exercise=exercise, resolved=None, reason=reason)


class ResultSet(BaseModel):
    # Matched exercises in the order their names were submitted
    items: List[ResolvedExercise] = Field(default_factory=list)
    # Names that were actually sent to the resolver (after the cap)
    attempted: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def find_by_video_id(self, video_id: str) -> Optional[ResolvedExercise]:
        for item in self.items:
            if item.video.video_id == video_id:
                return item
        return None


class PipelineRun(BaseModel):
    exercises: List[str] = Field(default_factory=list)
    results: ResultSet = Field(default_factory=ResultSet)


class ModalView(BaseModel):
    video_id: str
    title: str
    embed_url: str
    watch_url: str
    channel_info: str = ""

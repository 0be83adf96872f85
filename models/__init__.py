from .youtube import VideoCandidate, ImageResult
from .exercise import ResolvedExercise, Resolution, ResultSet, PipelineRun, ModalView
from .errors import (WorkoutDemosError, InvalidDocumentError, DocumentReadError,
    ExtractionError, ExtractionRequestError, ExtractionParseError, EmptyExtractionError)

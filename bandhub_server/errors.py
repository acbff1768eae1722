"""Domain errors raised by services; routes translate them to HTTP status codes."""


class VideoNotFoundError(LookupError):
    """Source video for a related-videos request does not exist (404)."""

    def __init__(self, video_id: str):
        super().__init__(f"Video with ID {video_id} not found")
        self.video_id = video_id


class UnknownBatchTargetError(ValueError):
    """Batch request named a target with no registered handler (400)."""

    def __init__(self, target: str, known):
        super().__init__(f"Unknown batch target '{target}'. Known targets: {', '.join(sorted(known))}")
        self.target = target

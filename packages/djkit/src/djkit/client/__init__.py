from .transport import ProxyClient
from .polling import VideoJobState, poll_video_generation
from .sse import parse_event_stream, parse_frame

__all__ = [
    "ProxyClient",
    "VideoJobState",
    "poll_video_generation",
    "parse_event_stream",
    "parse_frame",
]

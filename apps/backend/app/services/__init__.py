from app.services.gemini import GeminiService, get_gemini_service
from app.services.downloads import proxy_video_download

__all__ = ["GeminiService", "get_gemini_service", "proxy_video_download"]

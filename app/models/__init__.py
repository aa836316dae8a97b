from .youtube import YtDlpVideoInfo, TranscriptSegment, VideoTranscript
from .api import (
    VideoUrlRequest,
    GenerateSummaryRequest,
    SummaryRecord,
    GeneratedSummary,
    VideoIdResponse,
)
from .proxy import ProxyConfig
from .enums import LLMRole, LLMProviderType

from .formats import Format, TokenFormat
from .formatter import StreamFormatter
from .sinks import ConsoleSink, RecordingSink, RenderSink, RichTextSink

__all__ = [
    "Format",
    "TokenFormat",
    "StreamFormatter",
    "RenderSink",
    "RecordingSink",
    "RichTextSink",
    "ConsoleSink",
]
__version__ = "0.1.0"

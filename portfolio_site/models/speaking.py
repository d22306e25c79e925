"""演讲记录数据模型"""

from dataclasses import dataclass
from typing import Any, Optional

KINDS = ("talk", "workshop", "podcast")


@dataclass
class SpeakingEngagement:
    """一次演讲 / 工作坊 / 播客"""

    title: str
    kind: str
    event: str
    date: str
    language: str = "english"
    event_url: Optional[str] = None
    presentation_url: Optional[str] = None
    recording_url: Optional[str] = None

    def __post_init__(self):
        if self.kind not in KINDS:
            raise ValueError(f"未知的类型: {self.kind}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "kind": self.kind,
            "event": self.event,
            "date": self.date,
            "language": self.language,
            "eventUrl": self.event_url,
            "presentationUrl": self.presentation_url,
            "recordingUrl": self.recording_url,
        }

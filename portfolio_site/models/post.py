"""博客文章数据模型"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class BlogPost:
    """一篇 markdown 博客文章"""

    slug: str
    title: str
    date: str
    body: str
    html: str = ""
    description: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    reading_time_minutes: int = 1
    draft: bool = False

    def to_summary(self) -> dict[str, Any]:
        """列表页 / API 使用的摘要，不含正文"""
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "description": self.description,
            "tags": self.tags,
            "readingTime": self.reading_time_minutes,
        }

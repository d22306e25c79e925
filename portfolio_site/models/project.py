"""开源项目数据模型"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Project:
    """展示用的项目数据"""

    name: str
    url: str
    archived: bool = False
    description: Optional[str] = None
    homepage_url: Optional[str] = None
    stars: int = 0
    downloads: int = 0
    language: Optional[str] = None
    github_url: Optional[str] = None

    def __post_init__(self):
        if self.stars < 0 or self.downloads < 0:
            raise ValueError(
                f"stars/downloads 不能为负数: {self.name} ({self.stars}, {self.downloads})"
            )

    @property
    def link_url(self) -> str:
        """源码链接，没有 github_url 时退回到 url"""
        return self.github_url or self.url

    def to_dict(self) -> dict[str, Any]:
        """
        转换为页面 payload 使用的字典
        缺失字段保留为 None，由 delete_undefined 负责清理
        """
        return {
            "name": self.name,
            "url": self.url,
            "archived": self.archived,
            "description": self.description,
            "homepageUrl": self.homepage_url,
            "stars": self.stars,
            "downloads": self.downloads,
            "language": self.language,
            "githubUrl": self.github_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        """从字典创建实例"""
        return cls(
            name=data["name"],
            url=data["url"],
            archived=data.get("archived", False),
            description=data.get("description"),
            homepage_url=data.get("homepageUrl"),
            stars=data.get("stars", 0),
            downloads=data.get("downloads", 0),
            language=data.get("language"),
            github_url=data.get("githubUrl"),
        )

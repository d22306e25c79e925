"""Markdown 博客文章加载"""

import logging
import math
import re
from datetime import date, datetime
from pathlib import Path

import markdown
import yaml

from ..models.post import BlogPost
from .url import slugify

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200

_FRONTMATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)
_WORD_RE = re.compile(r"\w+")


class BlogError(Exception):
    """博客内容相关错误"""


class PostParseError(BlogError):
    """frontmatter 无法解析"""


class PostNotFoundError(BlogError):
    """文章不存在"""


def parse_frontmatter(text: str) -> tuple[dict, str]:
    """
    解析 YAML frontmatter

    Returns:
        (元数据, 正文)，没有 frontmatter 时元数据为空字典
    """
    text = text.lstrip("\ufeff")
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        metadata = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as e:
        raise PostParseError(f"frontmatter 格式错误: {e}") from e
    if not isinstance(metadata, dict):
        raise PostParseError("frontmatter 必须是 key: value 映射")

    return metadata, text[match.end():]


def render_markdown(body: str) -> str:
    """Markdown 转 HTML，标题锚点使用 slugify"""
    return markdown.markdown(
        body,
        extensions=["fenced_code", "tables", "toc"],
        extension_configs={"toc": {"slugify": lambda value, separator: slugify(value)}},
    )


def reading_time(body: str) -> int:
    """阅读时间 (分钟)，至少 1 分钟"""
    words = len(_WORD_RE.findall(body))
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def _format_date(value) -> str:
    # YAML 会把 2024-01-31 直接解析成 date
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value) if value else ""


def load_post(path: Path) -> BlogPost:
    """读取单篇文章"""
    metadata, body = parse_frontmatter(path.read_text(encoding="utf-8"))
    slug = path.stem

    tags = metadata.get("tags") or []
    if isinstance(tags, str):
        tags = [t.strip() for t in tags.split(",") if t.strip()]

    return BlogPost(
        slug=slug,
        title=str(metadata.get("title") or slug.replace("-", " ").title()),
        date=_format_date(metadata.get("date")),
        body=body,
        html=render_markdown(body),
        description=metadata.get("description"),
        tags=[str(t) for t in tags],
        reading_time_minutes=reading_time(body),
        draft=bool(metadata.get("draft", False)),
    )


def load_posts(posts_dir: Path) -> list[BlogPost]:
    """读取目录下所有文章，跳过草稿，按日期倒序"""
    if not posts_dir.exists():
        logger.warning("posts directory not found: %s", posts_dir)
        return []

    posts = []
    for md_file in sorted(posts_dir.glob("*.md")):
        post = load_post(md_file)
        if post.draft:
            logger.debug("skipping draft %s", md_file.name)
            continue
        posts.append(post)

    posts.sort(key=lambda p: p.date, reverse=True)
    return posts


def get_post(posts_dir: Path, slug: str) -> BlogPost:
    """按 slug 查找文章"""
    for post in load_posts(posts_dir):
        if post.slug == slug:
            return post
    raise PostNotFoundError(f"文章不存在: {slug}")

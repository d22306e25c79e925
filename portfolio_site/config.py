"""站点配置"""

import os
import subprocess
from pathlib import Path

# 默认内容目录
CONTENT_DIR = Path(__file__).parent.parent / "content"
POSTS_DIR = CONTENT_DIR / "posts"
DEFAULT_OUT_DIR = Path(__file__).parent.parent / "out"

SITE_TITLE = "Caleb Sabila"
AUTHOR_BIRTH_DATE = "1999-07-07"
GITHUB_URL = "https://github.com/jonathancaleb"


def get_site_url() -> str:
    """SITE_URL > VERCEL_URL > 本地地址"""
    site_url = os.environ.get("SITE_URL")
    if site_url:
        return site_url
    vercel_url = os.environ.get("VERCEL_URL")
    if vercel_url:
        return "https://" + vercel_url
    return "http://localhost:8000"


def _git(*args: str) -> str:
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return ""
    return result.stdout.strip()


def get_build_id() -> str:
    """短 commit hash + 当前 tag，git 不可用时为空"""
    parts = [_git("rev-parse", "--short", "HEAD"), _git("tag", "--points-at", "HEAD")]
    return "-".join(p for p in parts if p)

"""URL 与文本小工具"""

import re
from urllib.parse import parse_qsl, urlencode

_SCHEME_RE = re.compile(r"^[a-z][a-z\d+\-.]*:", re.IGNORECASE)
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def is_absolute_url(url: str) -> bool:
    """以 URI scheme 开头的视为外部链接，否则是站内路径"""
    return bool(_SCHEME_RE.match(url))


def format_url_with_query(url: str, params: dict[str, str]) -> str:
    """
    覆盖或追加 query 参数
    params 里没有的参数保持原样，同名重复参数合并为一个
    "*" 不转义；"~" 也保持原样 (URLSearchParams 会转成 %7E)
    """
    base, _, search = url.partition("?")
    pairs = parse_qsl(search, keep_blank_values=True)

    for key, value in params.items():
        updated = []
        found = False
        for k, v in pairs:
            if k != key:
                updated.append((k, v))
            elif not found:
                updated.append((k, value))
                found = True
        if not found:
            updated.append((key, value))
        pairs = updated

    return base + "?" + urlencode(pairs, safe="*")


def slugify(text: str) -> str:
    """生成标题锚点: "Hello, World!" -> "hello-world" """
    return _NON_ALNUM_RE.sub("-", text.lower()).strip("-")

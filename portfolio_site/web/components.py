"""页面组件 - Tailwind 样式的 HTML 片段"""

from html import escape
from typing import Optional

from ..core.url import is_absolute_url

# HTML 模板
LAYOUT_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <meta property="og:title" content="{title}">
    <meta property="og:url" content="{site_url}">
    <script src="https://cdn.tailwindcss.com"></script>
    <script>tailwind.config = {{ darkMode: 'media' }}</script>
</head>
<body class="bg-white dark:bg-gray-900 text-gray-900 dark:text-gray-100 min-h-screen">
    <div class="container mx-auto px-4 py-8 max-w-4xl">
        <nav class="flex gap-6 mb-8 text-lg">
            {nav}
        </nav>
        <main>
            {body}
        </main>
        <footer class="text-center text-gray-400 text-sm mt-12">
            {footer}
        </footer>
    </div>
</body>
</html>
"""

NAV_ITEMS = (
    ("/", "Home"),
    ("/projects", "Projects"),
    ("/blog", "Blog"),
    ("/speaking", "Speaking"),
)

_HEADING_SIZES = {1: "text-3xl", 2: "text-2xl", 3: "text-xl", 4: "text-lg"}


def link(href: str, text: str, variant: str = "default", raw: bool = False) -> str:
    """
    链接组件
    外部链接在新窗口打开；raw=True 时 text 视为已生成的 HTML
    """
    if variant == "discreet":
        classes = "hover:text-purple-500"
    else:
        classes = "text-purple-600 dark:text-purple-400 hover:underline"

    target = ' target="_blank" rel="noopener"' if is_absolute_url(href) else ""
    content = text if raw else escape(text)
    return f'<a href="{escape(href)}" class="{classes}"{target}>{content}</a>'


def heading(text: str, level: int = 1, id: Optional[str] = None) -> str:
    """标题组件，带 id 时悬停显示锚点链接"""
    if level not in (1, 2, 3, 4, 5):
        raise ValueError(f"不支持的标题级别: {level}")

    size = _HEADING_SIZES.get(level, "")
    id_attr = f' id="{escape(id)}"' if id else ""
    anchor = ""
    if id:
        anchor = (
            '<span class="sm:invisible group-hover:visible text-base">'
            + link(f"#{id}", "#", variant="discreet")
            + "</span>"
        )
    span_class = ' class="mr-2"' if id else ""
    return (
        f'<h{level}{id_attr} class="group my-4 {size} font-semibold">'
        f"<span{span_class}>{escape(text)}</span>{anchor}</h{level}>"
    )


def code(text: str) -> str:
    """行内代码"""
    return (
        '<code class="px-1 border border-purple-500 rounded bg-purple-100 '
        f'dark:bg-purple-900 text-sm font-mono">{escape(text)}</code>'
    )


def paragraph(html: str) -> str:
    """段落；内容是已转义的 HTML"""
    return f'<p class="my-4 leading-relaxed">{html}</p>'


def badge(text: str, color: str = "purple") -> str:
    return (
        f'<span class="inline-flex items-center gap-1 px-2 py-1 bg-{color}-100 '
        f'dark:bg-{color}-900 text-{color}-700 dark:text-{color}-300 text-xs '
        f'font-medium rounded-md">{escape(text)}</span>'
    )


def joke_alert() -> str:
    return (
        '<section class="p-4 border border-l-blue-500 border-t-blue-500 '
        "border-r-yellow-400 border-b-yellow-400 dark:border-l-blue-300 "
        "dark:border-t-blue-300 dark:border-r-yellow-500 dark:border-b-yellow-500 "
        'rounded space-y-1">'
        '<div class="font-semibold">👩‍💻 Code Hard, Nap Harder, Dream in Binary</div>'
        "<div>Because even our subconscious runs on zeros and ones. 😄🌙💤</div>"
        f'<div class="font-semibold">{link("/joke", "Interact with my joke bot")}</div>'
        "</section>"
    )


def layout(title: str, body: str, site_title: str, site_url: str, build_id: str = "") -> str:
    """整页外壳"""
    nav = "\n            ".join(link(href, text, variant="discreet") for href, text in NAV_ITEMS)
    full_title = f"{title} - {site_title}" if title else site_title
    footer = f"© {escape(site_title)}"
    if build_id:
        footer += f' <span class="ml-2">build {escape(build_id)}</span>'
    return LAYOUT_HTML.format(
        title=escape(full_title),
        site_url=escape(site_url),
        nav=nav,
        body=body,
        footer=footer,
    )

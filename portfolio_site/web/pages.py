"""页面渲染"""

from dataclasses import dataclass, field
from datetime import date
from html import escape
from pathlib import Path
from typing import Optional

from .. import config
from ..core.aggregator import SortPolicy, get_projects_props, get_speaking_props
from ..core.blog import get_post, load_posts
from ..models.project import Project
from .components import badge, code, heading, joke_alert, layout, link, paragraph

PROJECT_CARD_HTML = """
<article class="group relative flex flex-col bg-white dark:bg-gray-800 rounded-xl shadow-sm border border-gray-200 dark:border-gray-700 hover:shadow-lg transition-all duration-300 hover:-translate-y-1 overflow-hidden">
    {archived_badge}
    <div class="flex flex-col h-full p-6">
        <div class="mb-4">
            <h3 class="text-xl font-bold mb-3 group-hover:text-purple-600" title="{name}">{name}</h3>
            {language_badge}
        </div>
        <div class="flex-1 mb-6">
            <p class="text-gray-600 dark:text-gray-300 text-sm leading-relaxed line-clamp-3">{description}</p>
        </div>
        <div class="flex gap-3 mt-auto">
            {live_link}
            {source_link}
        </div>
    </div>
</article>
"""

ENGAGEMENT_ITEM_HTML = """
<li class="my-4">
    <div class="text-lg font-semibold">{title}</div>
    <div class="text-sm text-gray-500">{kind} · {event} · {date}</div>
    <div class="flex gap-3 text-sm mt-1">{links}</div>
</li>
"""

POST_ITEM_HTML = """
<li class="my-6">
    <div class="text-xl">{title_link}</div>
    <div class="text-sm text-gray-500">{date} · {reading_time} min read</div>
    <div class="flex gap-2 text-xs mt-1">{tags}</div>
    <div class="text-gray-600 dark:text-gray-300">{description}</div>
</li>
"""


@dataclass
class Site:
    """渲染页面需要的站点信息"""

    posts_dir: Path = config.POSTS_DIR
    site_url: str = field(default_factory=config.get_site_url)
    build_id: str = ""
    title: str = config.SITE_TITLE

    def page(self, title: str, body: str) -> str:
        return layout(title, body, self.title, self.site_url, self.build_id)


def age_on(birth: date, today: Optional[date] = None) -> int:
    """周岁"""
    today = today or date.today()
    return today.year - birth.year - ((today.month, today.day) < (birth.month, birth.day))


async def render_home(site: Site, today: Optional[date] = None) -> str:
    age = age_on(date.fromisoformat(config.AUTHOR_BIRTH_DATE), today)
    body = "".join(
        [
            '<section class="flex flex-col md:flex-row-reverse items-center md:items-start gap-6">',
            "<div>",
            heading("👋 Hello!"),
            paragraph(
                f"My name is Caleb. I'm a {age}-year-old software developer "
                "from Kampala, Uganda."
            ),
            paragraph(
                "As a software developer working in a consultancy firm, I focus on "
                "developer tooling and infrastructure. My interests span mobile apps, "
                "distributed systems, and web applications."
            ),
            paragraph(
                "I'm also an active member of the developer community on "
                f"{link(config.GITHUB_URL, 'GitHub')}. I spend most of my free time "
                f"building my side {link('/projects', 'projects')}, speaking at select "
                f"{link('/speaking', 'technical conferences')}, or writing on "
                f"{link('/blog', 'my blog')}."
            ),
            "</div></section>",
            f'<section class="my-2">{joke_alert()}</section>',
            '<div class="my-8 h-1 rounded bg-purple-500"></div>',
        ]
    )
    return site.page("", body)


def _project_card(project: dict) -> str:
    archived_badge = ""
    if project["archived"]:
        archived_badge = f'<div class="absolute top-3 right-3 z-10">{badge("Archived", "gray")}</div>'
    language = project.get("language")
    return PROJECT_CARD_HTML.format(
        archived_badge=archived_badge,
        name=escape(project["name"]),
        language_badge=badge(language) if language else "",
        description=escape(project.get("description") or ""),
        live_link=link(project["url"], "View Live"),
        source_link=link(Project.from_dict(project).link_url, "Source"),
    )


async def render_projects(site: Site, policy: SortPolicy = SortPolicy.SHOWCASE) -> str:
    props = await get_projects_props(policy)
    body = "".join(
        [
            '<section class="text-center max-w-3xl mx-auto">',
            heading("Projects"),
            '<div class="text-lg text-gray-600 dark:text-gray-300 leading-relaxed my-4">',
            "These are the open-source projects that I've built. Most of these started "
            "out of personal necessity and have grown into tools that I hope others "
            "find useful.</div>",
            '<div class="flex justify-center gap-8 mt-8 text-sm text-gray-600">',
            f'<span>{props["total"]} Projects</span>',
            f'<span>{props["active"]} Active</span>',
            "</div></section>",
            '<section class="mt-12 grid gap-6 sm:grid-cols-1 md:grid-cols-2 lg:grid-cols-3">',
            "".join(_project_card(p) for p in props["projects"]),
            "</section>",
        ]
    )
    return site.page("Projects", body)


async def render_speaking(site: Site) -> str:
    props = await get_speaking_props()
    items = []
    for e in props["engagements"]:
        links = []
        for key, label in (
            ("eventUrl", "Event"),
            ("presentationUrl", "Slides"),
            ("recordingUrl", "Recording"),
        ):
            if key in e:
                links.append(link(e[key], label))
        items.append(
            ENGAGEMENT_ITEM_HTML.format(
                title=escape(e["title"]),
                kind=escape(e["kind"]),
                event=escape(e["event"]),
                date=escape(e["date"]),
                links="".join(links),
            )
        )
    body = heading("Speaking") + f'<ul>{"".join(items)}</ul>'
    return site.page("Speaking", body)


async def render_joke(site: Site) -> str:
    body = "".join(
        [
            "<section>",
            heading("#ByteMe"),
            '<div><div class="h-10 bg-teal-500"></div><div class="h-10 bg-gray-200"></div></div>',
            paragraph(
                "Dang it, I broke myself! But no worries, I am undergoing repair. "
                "Be back soon. 😄🤖"
            ),
            "</section>",
            '<div class="my-6 text-xl text-center font-light">',
            "Glory to Algorithms! Glory to Debuggers!</div>",
        ]
    )
    return site.page("#ByteMe", body)


async def render_blog_index(site: Site) -> str:
    items = [
        POST_ITEM_HTML.format(
            title_link=link(f"/blog/{post.slug}", post.title),
            date=escape(post.date),
            reading_time=post.reading_time_minutes,
            tags="".join(code(t) for t in post.tags),
            description=escape(post.description or ""),
        )
        for post in load_posts(site.posts_dir)
    ]
    body = heading("Blog") + f'<ul>{"".join(items)}</ul>'
    return site.page("Blog", body)


async def render_post(site: Site, slug: str) -> str:
    """PostNotFoundError 由调用方处理"""
    post = get_post(site.posts_dir, slug)
    tags = " ".join(badge(t) for t in post.tags)
    body = "".join(
        [
            "<article>",
            heading(post.title),
            f'<div class="text-sm text-gray-500 mb-6">{escape(post.date)} · '
            f"{post.reading_time_minutes} min read {tags}</div>",
            f'<div class="prose dark:prose-invert max-w-none">{post.html}</div>',
            "</article>",
        ]
    )
    return site.page(post.title, body)

"""个人站点 CLI"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import config
from .core.aggregator import SortPolicy

app = typer.Typer(name="portfolio", help="个人作品集 + 博客站点工具")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _posts_dir(content_dir: Optional[Path]) -> Path:
    return content_dir / "posts" if content_dir else config.POSTS_DIR


@app.command()
def projects(
    sort: SortPolicy = typer.Option(
        SortPolicy.SHOWCASE, "--sort", "-s", help="排序方式: showcase/ranked"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="JSON 格式输出"),
):
    """
    列出项目

    示例:
      portfolio projects
      portfolio projects --sort ranked --json
    """
    from .core.aggregator import get_projects_props

    props = asyncio.run(get_projects_props(sort))

    if json_output:
        console.print(
            json.dumps(props, indent=2, ensure_ascii=False),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return

    table = Table(title=f"项目 ({props['active']}/{props['total']} 活跃)")
    table.add_column("项目", style="cyan", no_wrap=True)
    table.add_column("描述", max_width=50)
    table.add_column("语言", style="yellow")
    table.add_column("Stars", justify="right")
    table.add_column("状态")

    for p in props["projects"]:
        desc = p.get("description") or ""
        if len(desc) > 50:
            desc = desc[:47] + "..."
        table.add_row(
            p["name"],
            desc,
            p.get("language") or "-",
            str(p["stars"]),
            "已归档" if p["archived"] else "活跃",
        )

    console.print(table)


@app.command()
def speaking():
    """
    列出演讲记录
    """
    from .core.aggregator import get_speaking_props

    props = asyncio.run(get_speaking_props())

    table = Table(title="演讲")
    table.add_column("日期", style="yellow", no_wrap=True)
    table.add_column("标题", style="cyan")
    table.add_column("活动")
    table.add_column("类型")
    for e in props["engagements"]:
        table.add_row(e["date"], e["title"], e["event"], e["kind"])

    console.print(table)


@app.command()
def posts(
    content_dir: Optional[Path] = typer.Option(None, "--content", help="内容目录"),
):
    """
    列出博客文章
    """
    from .core.blog import BlogError, load_posts

    try:
        all_posts = load_posts(_posts_dir(content_dir))
    except BlogError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if not all_posts:
        console.print("[yellow]没有找到文章[/yellow]")
        return

    table = Table(title="文章")
    table.add_column("日期", style="yellow", no_wrap=True)
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("标题")
    table.add_column("阅读", justify="right")
    for post in all_posts:
        table.add_row(post.date, post.slug, post.title, f"{post.reading_time_minutes} min")

    console.print(table)


async def _render_site(posts_dir: Path) -> dict[str, str]:
    """渲染所有页面，返回 {相对路径: html}"""
    from .core.blog import load_posts
    from .web.pages import (
        Site,
        render_blog_index,
        render_home,
        render_joke,
        render_post,
        render_projects,
        render_speaking,
    )

    site = Site(posts_dir=posts_dir, build_id=config.get_build_id())
    pages = {
        "index.html": await render_home(site),
        "projects/index.html": await render_projects(site),
        "speaking/index.html": await render_speaking(site),
        "joke/index.html": await render_joke(site),
        "blog/index.html": await render_blog_index(site),
    }
    for post in load_posts(posts_dir):
        pages[f"blog/{post.slug}/index.html"] = await render_post(site, post.slug)
    return pages


@app.command()
def build(
    out_dir: Optional[Path] = typer.Option(None, "--out", "-o", help="输出目录"),
    content_dir: Optional[Path] = typer.Option(None, "--content", help="内容目录"),
):
    """
    导出静态站点

    任何数据加载失败都会中止构建
    """
    out = out_dir or config.DEFAULT_OUT_DIR

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]渲染页面...", total=None)
        try:
            pages = asyncio.run(_render_site(_posts_dir(content_dir)))
        except Exception as e:
            progress.stop()
            console.print(f"[red]构建失败: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)
        progress.update(
            task, completed=100, total=100, description=f"[green]渲染了 {len(pages)} 个页面"
        )

        task = progress.add_task("[cyan]写入文件...", total=len(pages))
        for rel_path, html in pages.items():
            target = out / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
            progress.advance(task)

    console.print(f"\n[bold green]构建完成![/bold green] 输出目录: {out}")


@app.command()
def web(
    port: int = typer.Option(8000, "--port", "-p", help="端口号"),
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="主机地址"),
    content_dir: Optional[Path] = typer.Option(None, "--content", help="内容目录"),
):
    """
    启动 Web 服务
    """
    import uvicorn

    from .web.app import create_app

    console.print(f"启动 Web 服务: http://{host}:{port}")
    uvicorn_app = create_app(content_dir)
    uvicorn.run(uvicorn_app, host=host, port=port)


if __name__ == "__main__":
    app()

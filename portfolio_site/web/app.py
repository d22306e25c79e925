"""Web 界面 - FastAPI"""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, RedirectResponse

from .. import config
from ..core.aggregator import (
    SortPolicy,
    delete_undefined,
    get_projects_props,
    get_speaking_props,
)
from ..core.blog import PostNotFoundError, load_posts
from .pages import (
    Site,
    render_blog_index,
    render_home,
    render_joke,
    render_post,
    render_projects,
    render_speaking,
)

logger = logging.getLogger(__name__)

# 永久重定向 (旧地址 -> 新地址)
REDIRECTS = {
    "/blog/return-type-inference": "/blog/target-type-inference",
}


def create_app(content_dir: str | Path | None = None, build_id: str | None = None) -> FastAPI:
    """创建 FastAPI 应用"""
    posts_dir = Path(content_dir) / "posts" if content_dir else config.POSTS_DIR
    site = Site(
        posts_dir=posts_dir,
        build_id=config.get_build_id() if build_id is None else build_id,
    )

    app = FastAPI(title=config.SITE_TITLE)

    for source, destination in REDIRECTS.items():
        app.add_api_route(
            source,
            _redirect_to(destination),
            methods=["GET"],
            include_in_schema=False,
        )

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """主页"""
        return await render_home(site)

    @app.get("/projects", response_class=HTMLResponse)
    async def projects():
        return await render_projects(site)

    @app.get("/projects/{slug}", include_in_schema=False)
    async def project_detail(slug: str):
        """单个项目页已下线，统一跳转到列表"""
        return RedirectResponse("/projects", status_code=308)

    @app.get("/speaking", response_class=HTMLResponse)
    async def speaking():
        return await render_speaking(site)

    @app.get("/joke", response_class=HTMLResponse)
    async def joke():
        return await render_joke(site)

    @app.get("/blog", response_class=HTMLResponse)
    async def blog():
        return await render_blog_index(site)

    @app.get("/blog/{slug}", response_class=HTMLResponse)
    async def blog_post(slug: str):
        try:
            return await render_post(site, slug)
        except PostNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e

    @app.get("/api/projects")
    async def api_projects(sort: SortPolicy = Query(SortPolicy.SHOWCASE)):
        """项目列表 API - 返回 JSON"""
        return await get_projects_props(sort)

    @app.get("/api/speaking")
    async def api_speaking():
        return await get_speaking_props()

    @app.get("/api/posts")
    async def api_posts():
        """文章列表 API"""
        return delete_undefined([post.to_summary() for post in load_posts(site.posts_dir)])

    logger.debug("app created, posts dir %s", posts_dir)
    return app


def _redirect_to(destination: str):
    async def redirect():
        return RedirectResponse(destination, status_code=308)

    return redirect

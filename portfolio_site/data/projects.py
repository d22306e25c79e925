"""项目数据源 + 懒加载"""

import asyncio
import logging
from typing import AsyncIterator, Iterable, Optional

from ..models.project import Project

logger = logging.getLogger(__name__)


class ProjectFetchError(RuntimeError):
    """外部数据源获取失败 (网络 / 认证 / 限流)"""


PROJECTS: tuple[Project, ...] = (
    Project(
        name="Rove",
        url="https://github.com/jonathancaleb/Rove",
        description=(
            "The Kotlin Music Player is a mobile application designed to clone the "
            "functionality of YouTube Music. Built with Kotlin, it supports various "
            "audio formats and features playlist creation, song search, and playback "
            "controls. With a modern user interface"
        ),
        stars=3,
        downloads=2,
        language="Kotlin",
        github_url="",
    ),
    Project(
        name="PDF Reader",
        url="https://github.com/jonathancaleb/PDFRipper",
        description="Python program to automatically extract text from a pdf documnet",
        stars=2,
        downloads=0,
        language="Python",
        github_url="",
    ),
    Project(
        name="Resume Builder",
        url="https://workfolio-ten.vercel.app/",
        description="A resume builder built using typescript",
        stars=4,
        downloads=2,
        language="Next js",
        github_url="",
    ),
    Project(
        name="Job App",
        url="https://play.google.com/store/apps/details?id=oss.avsi.connect",
        description=(
            "AVSI Connect is an innovative platform designed to facilitate job "
            "opportunities and foster professional connections within diverse "
            "industries. The platform serves as a dynamic marketplace where job "
            "seekers can discover employment opportunities."
        ),
        stars=4,
        downloads=10,
        language="Dart",
        github_url="",
    ),
    Project(
        name="CashOrbit",
        url="https://github.com/jonathancaleb/cashorbit",
        description=(
            "A user-friendly personal finance app designed to help you track "
            "expenses 💸, manage budgets 💰, and achieve your financial goals 🎯. "
            "With intuitive features like expense categorization 📊, budget "
            "tracking 📅, and financial insights 📈."
        ),
        stars=5,
        downloads=0,
        language="Dart",
        github_url="https://github.com/jonathancaleb/cashorbit",
    ),
    Project(
        name="EnoFlow",
        url="https://enoflow.vercel.app/",
        description=(
            "A productivity app inspired by Notion that combines ✍️ note-taking, "
            "✅ task management, 📊 databases, and more, all in one seamless "
            "experience. Built with Next.js, Python, and Postgres for a powerful, "
            "unified workspace!"
        ),
        stars=6,
        downloads=0,
        language="",
        github_url="https://github.com/jonathancaleb/enoflow",
    ),
    Project(
        name="Logistics and Supply system",
        url="https://www.traderepubliq.com/",
        description=(
            "Developed and implemented a comprehensive supply chain infrastructure "
            "tailored for emerging markets, facilitating the efficient acquisition "
            "and financing of essential commodities"
        ),
        stars=6,
        downloads=0,
        language="",
        github_url="",
    ),
    Project(
        name="Coffee analysis project",
        url="https://github.com/jonathancaleb/ADAP",
        description=(
            "A personal initiative to analyze coffee growth trends in Uganda using "
            "Python, data science, and machine learning. This project supports "
            "sustainable farming with predictive models and interactive "
            "visualizations."
        ),
        stars=5,
        downloads=0,
        language="Python",
        github_url="",
    ),
)


async def load_projects(
    source: Optional[Iterable[Project]] = None,
) -> AsyncIterator[Project]:
    """
    逐个产出项目
    每个项目之前让出一次事件循环，为以后接入真实 I/O (分页请求) 预留位置
    数据源抛出的异常原样向上传播
    """
    projects = PROJECTS if source is None else source
    count = 0
    for project in projects:
        await asyncio.sleep(0)
        count += 1
        yield project
    logger.debug("loaded %d projects", count)

"""缓冲 + 清理 + 排序：把懒加载序列变成页面可用的列表"""

import logging
from enum import Enum
from typing import Any, AsyncIterable, Iterable, Optional, TypeVar

from ..data.projects import load_projects
from ..data.speaking import load_speaking_engagements
from ..models.project import Project

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SortPolicy(str, Enum):
    """项目列表的排序方式"""

    SHOWCASE = "showcase"  # 未归档在前，再按名称
    RANKED = "ranked"  # 按 star 数降序


async def buffer_iterable(iterable: AsyncIterable[T]) -> list[T]:
    """把异步序列全部读入列表，保持顺序"""
    items = []
    async for item in iterable:
        items.append(item)
    return items


def delete_undefined(value: Any) -> Any:
    """
    递归删除值为 None 的 key，返回新对象，不修改输入
    0 / False / "" 等显式值保留
    """
    if isinstance(value, dict):
        return {k: delete_undefined(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [delete_undefined(v) for v in value]
    return value


def _get(item: Any, key: str) -> Any:
    if isinstance(item, dict):
        return item[key]
    return getattr(item, key)


def _name_key(name: str) -> tuple[str, str]:
    # 按字母序，大小写只用于打破平局 (小写在前)
    return name.casefold(), name.swapcase()


def sort_projects(projects: Iterable[T], policy: SortPolicy) -> list[T]:
    """
    按策略排序，返回新列表
    支持 Project 对象，也支持 to_dict() 之后的字典
    """
    policy = SortPolicy(policy)
    if policy is SortPolicy.SHOWCASE:
        return sorted(
            projects,
            key=lambda p: (bool(_get(p, "archived")), *_name_key(_get(p, "name"))),
        )
    # sorted 是稳定排序，star 数相同的保持原顺序
    return sorted(projects, key=lambda p: _get(p, "stars"), reverse=True)


async def get_projects_props(
    policy: SortPolicy = SortPolicy.SHOWCASE,
    source: Optional[Iterable[Project]] = None,
) -> dict[str, Any]:
    """
    项目页的数据获取
    任何数据源异常都直接抛出，由调用方当作构建失败处理
    """
    projects = await buffer_iterable(load_projects(source))

    # None 无法写入页面 payload
    cleaned = delete_undefined([p.to_dict() for p in projects])
    ordered = sort_projects(cleaned, policy)
    logger.info("projects props: %d projects (%s)", len(ordered), SortPolicy(policy).value)

    return {
        "projects": ordered,
        "total": len(ordered),
        "active": sum(1 for p in ordered if not p["archived"]),
    }


async def get_speaking_props() -> dict[str, Any]:
    """演讲页数据，按日期倒序"""
    engagements = await buffer_iterable(load_speaking_engagements())
    cleaned = delete_undefined([e.to_dict() for e in engagements])
    cleaned.sort(key=lambda e: e["date"], reverse=True)
    return {"engagements": cleaned}

# app/storage/post/post_interface.py

from typing import Optional, List, Protocol

from app.schemas.post import PostCreate, PostUpdate, PostFilter, PostOut


class IPostRepository(Protocol):
    """
    帖子仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    """

    def list_posts(self, filters: PostFilter) -> List[PostOut]:
        """
        获取帖子列表（含关联媒体），不分页：
        - filters.title: 标题不区分大小写的子串匹配
        - filters.author: 作者精确匹配
        """
        ...

    def get_by_id(self, post_id: int) -> Optional[PostOut]:
        """根据主键获取帖子（含关联媒体），未找到返回 None"""
        ...

    def create(self, data: PostCreate) -> PostOut:
        """创建帖子（不关联媒体）"""
        ...

    def update(self, post_id: int, data: PostUpdate) -> Optional[PostOut]:
        """
        merge-patch 更新 title / content / author：
        - 只覆盖非空字段
        - 未找到返回 None
        """
        ...

    def delete(self, post_id: int) -> bool:
        """
        删除帖子：
        - 同一事务中先删除 post_media 关联，再删除帖子
        - 返回是否删除成功
        """
        ...

    def attach_media(self, post_id: int, media_id: int) -> None:
        """
        建立帖子与媒体的关联（已存在则不重复插入）
        - 调用方负责确认帖子和媒体都存在
        """
        ...

    def detach_media(self, post_id: int, media_id: int) -> bool:
        """解除帖子与媒体的关联，返回是否真的删除了关联行"""
        ...

# app/storage/media/media_interface.py

from typing import Optional, List, Protocol

from app.schemas.media import MediaCreate, MediaOut


class IMediaRepository(Protocol):
    """
    媒体仓库接口协议（数据层抽象接口）
    """

    def list_media(self) -> List[MediaOut]:
        """返回全部媒体（按 id 升序），不分页"""
        ...

    def get_by_id(self, media_id: int) -> Optional[MediaOut]:
        """根据主键获取媒体，未找到返回 None"""
        ...

    def create(self, data: MediaCreate) -> MediaOut:
        """创建媒体记录"""
        ...

    def delete(self, media_id: int) -> bool:
        """
        删除媒体：
        - 同一事务中先解除所有帖子对它的关联（post_media），再删除媒体本身
        - 返回是否删除成功
        """
        ...

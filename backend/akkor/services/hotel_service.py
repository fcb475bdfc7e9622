"""
酒店服务
管理 Hotel 对象，图片持久化委托给 ImageUploadService
"""
import logging
from typing import List, Optional, Sequence
from sqlalchemy import func
from sqlalchemy.orm import Session
from akkor.exceptions import ConflictError, NotFoundError, ValidationError
from akkor.models.entities import Hotel
from akkor.models.schemas import HotelCreate, HotelUpdate
from akkor.services.image_upload_service import ImageFile, ImageUploadService

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "name": Hotel.name,
    "location": Hotel.location,
    "price": Hotel.price,
}

SEARCH_LIMIT = 10


class HotelService:
    """酒店服务"""

    def __init__(self, db: Session, uploader: Optional[ImageUploadService] = None):
        self.db = db
        self.uploader = uploader or ImageUploadService()

    def get_hotels(self, limit: int = 10, sort_by: str = "name", order: str = "DESC") -> List[Hotel]:
        """获取酒店列表，支持排序和数量限制"""
        column = SORTABLE_FIELDS.get(sort_by)
        if column is None:
            raise ValidationError(f"不支持的排序字段: {sort_by}")
        ordering = column.asc() if order.upper() == "ASC" else column.desc()
        return self.db.query(Hotel).order_by(ordering).limit(limit).all()

    def search_hotels(self, query: str) -> List[Hotel]:
        """按名称模糊搜索（不区分大小写）"""
        pattern = f"%{query.lower()}%"
        return self.db.query(Hotel).filter(
            func.lower(Hotel.name).like(pattern)
        ).limit(SEARCH_LIMIT).all()

    def get_hotel(self, hotel_id: str) -> Optional[Hotel]:
        """获取单个酒店"""
        return self.db.query(Hotel).filter(Hotel.id == hotel_id).first()

    def get_hotel_by_name(self, name: str) -> Optional[Hotel]:
        return self.db.query(Hotel).filter(Hotel.name == name).first()

    def require_hotel(self, hotel_id: str) -> Hotel:
        hotel = self.get_hotel(hotel_id)
        if not hotel:
            raise NotFoundError(f"酒店 {hotel_id} 不存在")
        return hotel

    def create_hotel(self, data: HotelCreate, images: Sequence[ImageFile]) -> Hotel:
        """创建酒店：名称不可重复，至少一张图片"""
        if self.get_hotel_by_name(data.name):
            raise ConflictError(f"酒店 '{data.name}' 已存在")

        if not images:
            raise ValidationError("至少需要上传一张图片")

        picture_list = self.uploader.upload_images(images)
        if not picture_list:
            raise ValidationError("图片上传失败")

        hotel = Hotel(**data.model_dump(), picture_list=picture_list)
        self.db.add(hotel)
        self.db.commit()
        self.db.refresh(hotel)
        logger.info(f"Created hotel {hotel.id} with {len(picture_list)} picture(s)")
        return hotel

    def update_hotel(self, hotel_id: str, data: HotelUpdate,
                     images: Optional[Sequence[ImageFile]] = None) -> Hotel:
        """部分更新酒店；新图片追加在已有图片之后"""
        hotel = self.require_hotel(hotel_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        new_name = update_data.get("name")
        if new_name and new_name != hotel.name and self.get_hotel_by_name(new_name):
            raise ConflictError(f"酒店 '{new_name}' 已存在")

        if images:
            new_urls = self.uploader.upload_images(images)
            # 重新赋值列表，JSON 列才会被标记为已修改
            hotel.picture_list = list(hotel.picture_list or []) + new_urls

        for key, value in update_data.items():
            setattr(hotel, key, value)

        self.db.commit()
        self.db.refresh(hotel)
        logger.info(f"Updated hotel {hotel.id}: {sorted(update_data)}")
        return hotel

    def delete_hotel(self, hotel_id: str) -> None:
        """删除酒店，其预订保留但清空酒店链接"""
        hotel = self.require_hotel(hotel_id)
        self.db.delete(hotel)
        self.db.commit()
        logger.info(f"Deleted hotel {hotel_id}")

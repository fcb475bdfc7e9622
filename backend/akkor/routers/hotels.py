"""
酒店管理路由
创建/更新使用 multipart 表单，图片字段名为 images
"""
from decimal import Decimal
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session
from akkor.database import get_db
from akkor.exceptions import AkkorError, to_http_exception
from akkor.models.entities import User
from akkor.models.schemas import ApiResponse, HotelCreate, HotelResponse, HotelUpdate, MessageResponse
from akkor.services.hotel_service import HotelService
from akkor.services.image_upload_service import ImageFile, ImageUploadService
from akkor.security.auth import require_admin

router = APIRouter(prefix="/hotel", tags=["酒店管理"])


def get_image_uploader() -> ImageUploadService:
    """依赖注入：图床上传服务"""
    return ImageUploadService()


def _to_image_files(images: Optional[List[UploadFile]]) -> List[ImageFile]:
    """UploadFile -> ImageFile，忽略空文件字段"""
    result = []
    for upload in images or []:
        if not upload.filename:
            continue
        result.append(ImageFile(
            filename=upload.filename,
            content=upload.file.read(),
            content_type=upload.content_type or "application/octet-stream",
        ))
    return result


@router.post("", response_model=ApiResponse[HotelResponse], status_code=status.HTTP_201_CREATED)
def create_hotel(
    name: str = Form(..., min_length=3, max_length=100),
    location: str = Form(..., min_length=3, max_length=255),
    description: str = Form(..., min_length=10),
    price: Decimal = Form(..., gt=0),
    street: Optional[str] = Form(None, max_length=255),
    images: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    uploader: ImageUploadService = Depends(get_image_uploader),
    current_user: User = Depends(require_admin)
):
    """创建酒店（至少一张图片）"""
    data = HotelCreate(name=name, location=location, street=street, description=description, price=price)
    service = HotelService(db, uploader)
    try:
        hotel = service.create_hotel(data, _to_image_files(images))
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_201_CREATED, "message": "酒店创建成功", "data": hotel}


@router.get("", response_model=ApiResponse[List[HotelResponse]])
def list_hotels(
    limit: int = Query(10, ge=1, le=100),
    sort_by: Literal["name", "location", "price"] = "name",
    order: Literal["ASC", "DESC"] = "DESC",
    db: Session = Depends(get_db)
):
    """获取酒店列表（公开）"""
    hotels = HotelService(db).get_hotels(limit=limit, sort_by=sort_by, order=order)
    return {
        "status_code": status.HTTP_200_OK,
        "message": "获取酒店列表成功" if hotels else "暂无酒店",
        "data": hotels
    }


@router.get("/search/{query}", response_model=ApiResponse[List[HotelResponse]])
def search_hotels(query: str, db: Session = Depends(get_db)):
    """按名称搜索酒店（公开）"""
    hotels = HotelService(db).search_hotels(query)
    return {
        "status_code": status.HTTP_200_OK,
        "message": "找到匹配酒店" if hotels else "没有匹配的酒店",
        "data": hotels
    }


@router.get("/{hotel_id}", response_model=ApiResponse[HotelResponse])
def get_hotel(hotel_id: str, db: Session = Depends(get_db)):
    """获取酒店详情（公开）"""
    try:
        hotel = HotelService(db).require_hotel(hotel_id)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": "获取酒店成功", "data": hotel}


@router.patch("/{hotel_id}", response_model=ApiResponse[HotelResponse])
def update_hotel(
    hotel_id: str,
    name: Optional[str] = Form(None, min_length=3, max_length=100),
    location: Optional[str] = Form(None, min_length=3, max_length=255),
    description: Optional[str] = Form(None, min_length=10),
    price: Optional[Decimal] = Form(None, gt=0),
    street: Optional[str] = Form(None, max_length=255),
    images: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    uploader: ImageUploadService = Depends(get_image_uploader),
    current_user: User = Depends(require_admin)
):
    """更新酒店（新图片追加到现有图片之后）"""
    fields = {
        "name": name, "location": location, "description": description,
        "price": price, "street": street,
    }
    data = HotelUpdate(**{k: v for k, v in fields.items() if v is not None})
    service = HotelService(db, uploader)
    try:
        hotel = service.update_hotel(hotel_id, data, _to_image_files(images))
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": "酒店更新成功", "data": hotel}


@router.delete("/{hotel_id}", response_model=MessageResponse)
def delete_hotel(
    hotel_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """删除酒店（关联预订保留）"""
    try:
        HotelService(db).delete_hotel(hotel_id)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": f"酒店 {hotel_id} 已删除"}

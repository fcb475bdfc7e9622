"""
预订服务
管理 Booking 对象，关联 User 与 Hotel，执行“本人或管理员”规则
"""
import logging
from typing import List
from sqlalchemy.orm import Session, joinedload
from akkor.exceptions import ForbiddenError, NotFoundError
from akkor.models.entities import Booking, User
from akkor.models.schemas import BookingCreate, BookingUpdate
from akkor.security.permissions import ensure_owner_or_admin
from akkor.services.hotel_service import HotelService
from akkor.services.user_service import UserService

logger = logging.getLogger(__name__)


class BookingService:
    """预订服务"""

    def __init__(self, db: Session):
        self.db = db
        self.hotel_service = HotelService(db)
        self.user_service = UserService(db)

    def _query(self):
        return self.db.query(Booking).options(
            joinedload(Booking.user), joinedload(Booking.hotel)
        )

    def _reload(self, booking_id: str) -> Booking:
        return self._query().filter(Booking.id == booking_id).one()

    def get_bookings(self, actor: User) -> List[Booking]:
        """管理员返回全部预订，其余角色只返回自己的预订"""
        query = self._query()
        if not actor.is_admin:
            query = query.filter(Booking.user_id == actor.id)
        return query.order_by(Booking.created_at.desc()).all()

    def get_user_bookings(self, user_id: str, actor: User) -> List[Booking]:
        """获取指定用户的预订"""
        ensure_owner_or_admin(actor, user_id, "只能查看自己的预订")
        self.user_service.require_user(user_id)
        return self._query().filter(
            Booking.user_id == user_id
        ).order_by(Booking.created_at.desc()).all()

    def get_booking(self, booking_id: str, actor: User) -> Booking:
        """获取单个预订（先判存在，再判归属）"""
        booking = self._query().filter(Booking.id == booking_id).first()
        if not booking:
            raise NotFoundError(f"预订 {booking_id} 不存在")
        ensure_owner_or_admin(actor, booking.user_id, "无权访问该预订")
        return booking

    def create_booking(self, data: BookingCreate, actor: User) -> Booking:
        """创建预订；管理员可通过 user_id 代他人预订"""
        owner_id = data.user_id or actor.id
        if owner_id != actor.id and not actor.is_admin:
            raise ForbiddenError("只能为自己创建预订")

        owner = self.user_service.require_user(owner_id)
        hotel = self.hotel_service.require_hotel(data.hotel_id)

        booking = Booking(
            user=owner,
            hotel=hotel,
            check_in_date=data.check_in_date,
            check_out_date=data.check_out_date,
        )
        self.db.add(booking)
        self.db.commit()
        logger.info(f"Created booking {booking.id} for user {owner.id} at hotel {hotel.id}")
        return self._reload(booking.id)

    def update_booking(self, booking_id: str, data: BookingUpdate, actor: User) -> Booking:
        """部分更新预订"""
        booking = self.get_booking(booking_id, actor)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        hotel_id = update_data.pop("hotel_id", None)
        if hotel_id:
            booking.hotel = self.hotel_service.require_hotel(hotel_id)

        for key, value in update_data.items():
            setattr(booking, key, value)

        self.db.commit()
        logger.info(f"Updated booking {booking.id}")
        return self._reload(booking.id)

    def delete_booking(self, booking_id: str, actor: User) -> None:
        """删除预订"""
        booking = self.get_booking(booking_id, actor)
        self.db.delete(booking)
        self.db.commit()
        logger.info(f"Deleted booking {booking_id} by user {actor.id}")

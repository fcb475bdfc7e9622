# Services module
from akkor.services.user_service import UserService
from akkor.services.auth_service import AuthService
from akkor.services.hotel_service import HotelService
from akkor.services.booking_service import BookingService
from akkor.services.image_upload_service import ImageFile, ImageUploadService

__all__ = [
    'UserService', 'AuthService', 'HotelService', 'BookingService',
    'ImageFile', 'ImageUploadService'
]

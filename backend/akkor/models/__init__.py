# Models module
from akkor.models.entities import User, UserRole, Hotel, Booking

__all__ = ['User', 'UserRole', 'Hotel', 'Booking']

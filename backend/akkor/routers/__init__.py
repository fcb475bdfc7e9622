# API Routers
from akkor.routers import auth, users, hotels, bookings

__all__ = ['auth', 'users', 'hotels', 'bookings']

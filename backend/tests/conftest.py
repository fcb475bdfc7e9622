"""
Pytest 配置和共享 fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from datetime import datetime
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from akkor.database import Base, get_db, enable_sqlite_foreign_keys
from akkor.models import entities  # noqa
from akkor.models.entities import User, UserRole, Hotel, Booking
from akkor.security.auth import get_password_hash, create_access_token
from akkor.routers.hotels import get_image_uploader
from akkor.main import app

DEFAULT_PASSWORD = "password123"


class FakeUploader:
    """替代图床：记录上传的文件名并返回固定 URL"""

    def __init__(self):
        self.uploaded = []

    def upload_images(self, files):
        self.uploaded.extend(f.filename for f in files)
        return [f"https://img.example.com/{f.filename}" for f in files]


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def fake_uploader():
    return FakeUploader()


@pytest.fixture(scope="function")
def client(db_session, fake_uploader):
    """创建测试客户端"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_uploader] = lambda: fake_uploader
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== 用户 Fixtures ==============

def make_user(db_session, email, role=UserRole.USER, firstname="John", lastname="Doe",
              password=DEFAULT_PASSWORD):
    user = User(
        firstname=firstname,
        lastname=lastname,
        email=email,
        pseudo=email.split("@")[0],
        password_hash=get_password_hash(password),
        role=role
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers_for(user):
    token = create_access_token(user.id, user.email, user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(db_session):
    return make_user(db_session, "admin@akkor.com", UserRole.ADMIN, "Alice", "Admin")


@pytest.fixture
def regular_user(db_session):
    return make_user(db_session, "john.doe@example.com", UserRole.USER)


@pytest.fixture
def other_user(db_session):
    return make_user(db_session, "jane.roe@example.com", UserRole.USER, "Jane", "Roe")


@pytest.fixture
def employee_user(db_session):
    return make_user(db_session, "staff@akkor.com", UserRole.EMPLOYEE, "Eric", "Staff")


@pytest.fixture
def admin_headers(admin_user):
    """管理员认证请求头"""
    return auth_headers_for(admin_user)


@pytest.fixture
def user_headers(regular_user):
    """普通用户认证请求头"""
    return auth_headers_for(regular_user)


@pytest.fixture
def other_user_headers(other_user):
    return auth_headers_for(other_user)


@pytest.fixture
def employee_headers(employee_user):
    """员工认证请求头"""
    return auth_headers_for(employee_user)


# ============== 实体 Fixtures ==============

@pytest.fixture
def sample_hotel(db_session):
    """创建测试酒店"""
    hotel = Hotel(
        name="Luxury Hotel",
        location="Paris, France",
        street="123 Main Street",
        description="A beautiful luxury hotel in the heart of Paris",
        price=Decimal("299.99"),
        picture_list=["https://img.example.com/front.jpg"]
    )
    db_session.add(hotel)
    db_session.commit()
    db_session.refresh(hotel)
    return hotel


@pytest.fixture
def sample_booking(db_session, regular_user, sample_hotel):
    """regular_user 在 sample_hotel 的预订"""
    booking = Booking(
        user_id=regular_user.id,
        hotel_id=sample_hotel.id,
        check_in_date=datetime(2025, 3, 11, 12, 0),
        check_out_date=datetime(2025, 3, 15, 12, 0)
    )
    db_session.add(booking)
    db_session.commit()
    db_session.refresh(booking)
    return booking


@pytest.fixture
def user_factory(db_session):
    """按需创建用户"""
    def factory(email, role=UserRole.USER, **kwargs):
        return make_user(db_session, email, role, **kwargs)
    return factory


@pytest.fixture
def headers_for():
    return auth_headers_for

"""
酒店管理 API 单元测试
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from akkor.models.entities import Booking, Hotel


HOTEL_FORM = {
    "name": "Grand Hotel",
    "location": "Lyon, France",
    "street": "1 Place Bellecour",
    "description": "A grand hotel on the main square of Lyon",
    "price": "189.50"
}


def image(name="front.jpg"):
    return ("images", (name, b"\x89PNG fake image bytes", "image/png"))


class TestCreateHotel:
    """创建酒店测试"""

    def test_create_hotel(self, client: TestClient, admin_headers, fake_uploader):
        """测试创建酒店并上传图片"""
        response = client.post("/hotel", headers=admin_headers, data=HOTEL_FORM,
                               files=[image("front.jpg"), image("room.jpg")])

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Grand Hotel"
        assert Decimal(str(data["price"])) == Decimal("189.50")
        assert data["picture_list"] == [
            "https://img.example.com/front.jpg",
            "https://img.example.com/room.jpg",
        ]
        assert fake_uploader.uploaded == ["front.jpg", "room.jpg"]

    def test_create_hotel_without_images(self, client: TestClient, admin_headers, db_session):
        """测试没有图片时拒绝创建"""
        response = client.post("/hotel", headers=admin_headers, data=HOTEL_FORM)

        assert response.status_code == 400
        assert db_session.query(Hotel).count() == 0

    def test_create_hotel_duplicate_name(self, client: TestClient, admin_headers, sample_hotel):
        form = {**HOTEL_FORM, "name": sample_hotel.name}
        response = client.post("/hotel", headers=admin_headers, data=form, files=[image()])

        assert response.status_code == 409

    def test_create_hotel_invalid_price(self, client: TestClient, admin_headers):
        form = {**HOTEL_FORM, "price": "-10"}
        response = client.post("/hotel", headers=admin_headers, data=form, files=[image()])

        assert response.status_code == 422

    def test_create_hotel_short_description(self, client: TestClient, admin_headers):
        form = {**HOTEL_FORM, "description": "tiny"}
        response = client.post("/hotel", headers=admin_headers, data=form, files=[image()])

        assert response.status_code == 422

    def test_create_hotel_requires_admin(self, client: TestClient, user_headers):
        response = client.post("/hotel", headers=user_headers, data=HOTEL_FORM, files=[image()])
        assert response.status_code == 403

    def test_create_hotel_requires_auth(self, client: TestClient):
        response = client.post("/hotel", data=HOTEL_FORM, files=[image()])
        assert response.status_code == 401


class TestListHotels:
    """酒店列表/搜索测试（公开接口）"""

    @pytest.fixture
    def hotels(self, db_session):
        rows = [
            Hotel(name="Alpha Inn", location="Nice", description="Seaside inn near the port",
                  price=Decimal("80.00"), picture_list=["a"]),
            Hotel(name="Beta Lodge", location="Annecy", description="Mountain lodge by the lake",
                  price=Decimal("150.00"), picture_list=["b"]),
            Hotel(name="Gamma Palace", location="Cannes", description="Palace on the Croisette",
                  price=Decimal("420.00"), picture_list=["c"]),
        ]
        db_session.add_all(rows)
        db_session.commit()
        return rows

    def test_list_hotels_default_order(self, client: TestClient, hotels):
        response = client.get("/hotel")

        assert response.status_code == 200
        names = [h["name"] for h in response.json()["data"]]
        assert names == ["Gamma Palace", "Beta Lodge", "Alpha Inn"]

    def test_list_hotels_sort_by_price_asc(self, client: TestClient, hotels):
        response = client.get("/hotel?sort_by=price&order=ASC")

        names = [h["name"] for h in response.json()["data"]]
        assert names == ["Alpha Inn", "Beta Lodge", "Gamma Palace"]

    def test_list_hotels_limit(self, client: TestClient, hotels):
        response = client.get("/hotel?limit=2")
        assert len(response.json()["data"]) == 2

    def test_list_hotels_invalid_sort(self, client: TestClient, hotels):
        response = client.get("/hotel?sort_by=description")
        assert response.status_code == 422

    def test_list_hotels_empty(self, client: TestClient):
        response = client.get("/hotel")

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_search_hotels(self, client: TestClient, hotels):
        response = client.get("/hotel/search/lodge")

        assert response.status_code == 200
        assert [h["name"] for h in response.json()["data"]] == ["Beta Lodge"]

    def test_get_hotel(self, client: TestClient, sample_hotel):
        response = client.get(f"/hotel/{sample_hotel.id}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == sample_hotel.id

    def test_get_hotel_not_found(self, client: TestClient):
        response = client.get("/hotel/unknown-id")
        assert response.status_code == 404


class TestUpdateHotel:
    """更新酒店测试"""

    def test_update_hotel_fields(self, client: TestClient, admin_headers, sample_hotel):
        response = client.patch(f"/hotel/{sample_hotel.id}", headers=admin_headers,
                                data={"price": "349.00"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert Decimal(str(data["price"])) == Decimal("349.00")
        assert data["name"] == sample_hotel.name

    def test_update_hotel_appends_images(self, client: TestClient, admin_headers, sample_hotel):
        """测试新图片追加到已有图片之后"""
        response = client.patch(f"/hotel/{sample_hotel.id}", headers=admin_headers,
                                data={"name": "Luxury Hotel Renovated"}, files=[image("pool.jpg")])

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Luxury Hotel Renovated"
        assert data["picture_list"] == [
            "https://img.example.com/front.jpg",
            "https://img.example.com/pool.jpg",
        ]

    def test_update_hotel_not_found(self, client: TestClient, admin_headers):
        response = client.patch("/hotel/missing", headers=admin_headers, data={"price": "10"})
        assert response.status_code == 404

    def test_update_hotel_requires_admin(self, client: TestClient, user_headers, sample_hotel):
        response = client.patch(f"/hotel/{sample_hotel.id}", headers=user_headers, data={"price": "10"})
        assert response.status_code == 403


class TestDeleteHotel:
    """删除酒店测试"""

    def test_delete_hotel(self, client: TestClient, admin_headers, sample_hotel, db_session):
        hotel_id = sample_hotel.id
        response = client.delete(f"/hotel/{hotel_id}", headers=admin_headers)

        assert response.status_code == 200
        assert db_session.query(Hotel).filter(Hotel.id == hotel_id).first() is None

    def test_delete_hotel_keeps_bookings(self, client: TestClient, admin_headers, sample_hotel,
                                         sample_booking, db_session):
        """测试删除酒店后预订保留，酒店链接被清空"""
        booking_id = sample_booking.id
        response = client.delete(f"/hotel/{sample_hotel.id}", headers=admin_headers)
        assert response.status_code == 200

        db_session.expire_all()
        booking = db_session.query(Booking).filter(Booking.id == booking_id).first()
        assert booking is not None
        assert booking.hotel_id is None
        assert booking.user_id is not None

    def test_delete_hotel_not_found(self, client: TestClient, admin_headers):
        response = client.delete("/hotel/missing", headers=admin_headers)
        assert response.status_code == 404

    def test_delete_hotel_requires_admin(self, client: TestClient, user_headers, sample_hotel):
        response = client.delete(f"/hotel/{sample_hotel.id}", headers=user_headers)
        assert response.status_code == 403

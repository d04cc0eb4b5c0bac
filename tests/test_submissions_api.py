import re
from datetime import datetime

import pytest


APPLICANT = {"fullName": "Phạm Văn Cường", "phone": "0909000111", "email": "cuong@example.vn"}


# Contact form -----------------------------------------------------------


def test_contact_success(client, store):
    response = client.post("/api/contact", json={"name": "A", "email": "a@b.com", "message": "hi"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert re.fullmatch(r"DVC\d+", body["data"]["ticketId"])
    stored = store.contacts.snapshot()
    assert stored[0]["status"] == "pending"
    assert stored[0]["phone"] == ""


@pytest.mark.parametrize("email", ["bad", "a@b", "a b@c.com", "a@b.com\n", " a@b.com"])
def test_contact_invalid_email(client, store, email):
    response = client.post("/api/contact", json={"name": "A", "email": email, "message": "hi"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email không hợp lệ"}
    assert len(store.contacts) == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@b.com", "message": "hi"},
        {"name": "A", "message": "hi"},
        {"name": "A", "email": "a@b.com", "message": "   "},
    ],
)
def test_contact_missing_fields(client, payload):
    response = client.post("/api/contact", json=payload)
    assert response.status_code == 400
    assert response.json()["message"] == "Vui lòng điền đầy đủ thông tin bắt buộc"


def test_contact_tickets_are_unique(client):
    ids = {
        client.post("/api/contact", json={"name": "A", "email": "a@b.com", "message": str(i)}).json()["data"]["ticketId"]
        for i in range(20)
    }
    assert len(ids) == 20


def test_malformed_json_body(client):
    response = client.post("/api/contact", content="{oops", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Dữ liệu không hợp lệ"}


# Reviews ----------------------------------------------------------------


@pytest.mark.parametrize("rating", [0, 6, None, "abc", 4.5, True])
def test_review_rating_out_of_range(client, rating):
    response = client.post("/api/services/cap-cccd/reviews", json={"rating": rating, "comment": "x"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Vui lòng đánh giá từ 1-5 sao"}


def test_review_unknown_service(client):
    response = client.post("/api/services/khong-co/reviews", json={"rating": 5})
    assert response.status_code == 404
    assert response.json()["message"] == "Không tìm thấy dịch vụ"


def test_review_created_with_defaults(client):
    body = client.post("/api/services/cap-cccd/reviews", json={"rating": "4", "comment": "  Nhanh gọn  "}).json()
    assert body["message"] == "Cảm ơn bạn đã đánh giá dịch vụ!"
    review = body["data"]
    assert review["rating"] == 4
    assert review["comment"] == "  Nhanh gọn  "
    assert review["userName"] == "Ẩn danh"
    assert review["status"] == "approved"
    assert review["serviceId"] == "cap-cccd"


def test_review_listing_and_stats(client):
    for rating in (5, 4, 4):
        client.post("/api/services/doi-cccd/reviews", json={"rating": rating, "userName": "Lan"})
    client.post("/api/services/cap-cccd/reviews", json={"rating": 1})

    data = client.get("/api/services/doi-cccd/reviews", params={"limit": 2}).json()["data"]
    assert len(data["reviews"]) == 2
    assert data["stats"]["total"] == 3
    assert data["stats"]["average"] == 4.3
    assert data["stats"]["distribution"] == {"5": 1, "4": 2, "3": 0, "2": 0, "1": 0}
    assert data["pagination"]["totalPages"] == 2


def test_review_average_rounds_halves_up(client):
    for rating in (4, 4, 4, 5):
        client.post("/api/services/doi-cccd/reviews", json={"rating": rating})
    stats = client.get("/api/services/doi-cccd/reviews").json()["data"]["stats"]
    assert stats["average"] == 4.3


def test_review_long_comment_is_accepted(client):
    comment = "a" * 5000
    response = client.post("/api/services/cap-cccd/reviews", json={"rating": 5, "comment": comment})
    assert response.status_code == 200
    assert response.json()["data"]["comment"] == comment


def test_review_listing_empty(client):
    data = client.get("/api/services/dang-ky-xe/reviews").json()["data"]
    assert data["reviews"] == []
    assert data["stats"]["average"] == 0


# Applications and tracking ----------------------------------------------


def test_application_unknown_service(client):
    response = client.post("/api/applications", json={"serviceId": "khong-co", "applicant": APPLICANT})
    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.parametrize(
    "payload",
    [
        {"applicant": APPLICANT},
        {"serviceId": "cap-cccd"},
        {"serviceId": "cap-cccd", "applicant": {"fullName": "Phạm Văn Cường"}},
        {"serviceId": "cap-cccd", "applicant": {"phone": "0909000111"}},
    ],
)
def test_application_missing_fields(client, payload):
    response = client.post("/api/applications", json=payload)
    assert response.status_code == 400
    assert response.json()["message"] == "Vui lòng điền đầy đủ thông tin bắt buộc"


def test_application_then_tracking(client):
    response = client.post(
        "/api/applications",
        json={"serviceId": "dang-ky-khai-sinh", "applicant": APPLICANT, "deliveryMethod": "post"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Nộp hồ sơ thành công!"
    code = body["data"]["applicationCode"]
    assert re.fullmatch(r"HS\d{4}\d+", code)
    assert code[2:6] == str(datetime.now().year)

    application = body["data"]["application"]
    assert application["deliveryMethod"] == "post"
    assert application["paymentMethod"] == "cash"
    assert application["agency"] == "UBND cấp xã"

    tracked = client.get(f"/api/tracking/{code}").json()["data"]
    assert tracked["code"] == code
    assert tracked["status"] == "received"
    assert [h["status"] for h in tracked["statusHistory"]] == ["received"]
    assert tracked["applicant"]["fullName"] == "Phạm Văn Cường"

    assert client.get(f"/api/applications/{code.lower()}").json()["data"]["code"] == code


def test_tracking_demo_record(client):
    data = client.get("/api/tracking/HS2026005678").json()["data"]
    assert data["status"] == "completed"
    assert len(data["statusHistory"]) == 5


def test_tracking_code_is_case_insensitive(client):
    assert client.get("/api/tracking/hs2026001234").status_code == 200


def test_tracking_not_found(client):
    response = client.get("/api/tracking/HS0000000000")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Không tìm thấy hồ sơ với mã số này"}


def test_application_lookup_not_found(client):
    response = client.get("/api/applications/HS0000000000")
    assert response.status_code == 404
    assert response.json()["message"] == "Không tìm thấy hồ sơ với mã này"


def test_application_codes_skip_seed_records(store):
    import asyncio

    from egov_portal_api.app.core.codes import CodeGenerator
    from egov_portal_api.app.schemas.tracking import ApplicantIn, ApplicationCreate
    from egov_portal_api.app.services.application_service import ApplicationService

    year = datetime.now().year
    store.tracking.seed([{"code": f"HS{year}000500", "status": "completed"}])
    store.application_codes = CodeGenerator("HS", digits=6, with_year=True, exists=store.tracking.contains, start=500)
    service = ApplicationService(store)
    data = ApplicationCreate(service_id="cap-cccd", applicant=ApplicantIn(full_name="A", phone="1"))
    record = asyncio.run(service.submit_application(data))
    assert record["code"] == f"HS{year}000501"
    assert store.tracking.get(f"HS{year}000500")["status"] == "completed"


# Appointments -----------------------------------------------------------


def test_appointment_roundtrip(client):
    body = client.post(
        "/api/appointments",
        json={"serviceId": "cap-gplx", "date": "2026-02-10", "time": "09:00", "fullName": "Lê Hoa", "phone": "0911"},
    ).json()
    assert body["message"] == "Đặt lịch hẹn thành công! Vui lòng chờ xác nhận."
    code = body["data"]["appointmentCode"]
    assert re.fullmatch(r"LH\d{8}", code)
    appointment = body["data"]["appointment"]
    assert appointment["location"] == "Sở Giao thông Vận tải"
    assert appointment["status"] == "pending"

    fetched = client.get(f"/api/appointments/{code.lower()}").json()["data"]
    assert fetched["serviceName"] == "Cấp Giấy phép lái xe hạng B1"


def test_appointment_missing_fields(client):
    response = client.post("/api/appointments", json={"serviceId": "cap-gplx", "fullName": "Lê Hoa", "phone": "0911"})
    assert response.status_code == 400


def test_appointment_unknown_service(client):
    response = client.post(
        "/api/appointments",
        json={"serviceId": "x", "date": "2026-02-10", "time": "09:00", "fullName": "Lê Hoa", "phone": "0911"},
    )
    assert response.status_code == 404


def test_appointment_not_found(client):
    response = client.get("/api/appointments/LH00000000")
    assert response.status_code == 404
    assert response.json()["message"] == "Không tìm thấy lịch hẹn với mã này"

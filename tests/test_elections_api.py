import asyncio
import re
from datetime import datetime

from egov_portal_api.app.services.election_service import ElectionService


def test_overview(client):
    data = client.get("/api/elections").json()["data"]
    assert data["electionDate"] == "2026-05-24"


def test_subscribe(client):
    body = client.post("/api/elections/subscribe", json={"email": "cu.tri@example.vn", "name": "Mai"}).json()
    assert body["success"] is True
    assert re.fullmatch(r"SUB\d+", body["data"]["subscriptionId"])


def test_subscribe_requires_contact(client):
    response = client.post("/api/elections/subscribe", json={"name": "Mai"})
    assert response.status_code == 400
    assert response.json()["message"] == "Vui lòng cung cấp email hoặc số điện thoại"


def test_subscribe_duplicate(client, store):
    client.post("/api/elections/subscribe", json={"phone": "0901"})
    response = client.post("/api/elections/subscribe", json={"email": "x@y.vn", "phone": "0901"})
    assert response.status_code == 400
    assert response.json()["message"] == "Email hoặc số điện thoại đã được đăng ký"
    assert len(store.subscriptions) == 1


def test_check_voter_registered(client):
    body = client.post(
        "/api/elections/check-voter",
        json={"idNumber": "001234567890", "fullName": "nguyễn văn an", "birthYear": "1990"},
    ).json()
    assert body["data"]["registered"] is True
    assert body["data"]["voter"]["pollingStation"]["voterNumber"] == 1234


def test_check_voter_mismatch(client):
    data = client.post(
        "/api/elections/check-voter",
        json={"idNumber": "001234567890", "fullName": "Nguyễn Văn An", "birthYear": 1991},
    ).json()["data"]
    assert data == {
        "registered": False,
        "reason": "Thông tin không khớp",
        "suggestion": "Vui lòng kiểm tra lại họ tên và năm sinh. Nếu cần hỗ trợ, liên hệ UBND xã/phường.",
    }


def test_check_voter_under_age(client):
    data = client.post(
        "/api/elections/check-voter",
        json={"idNumber": "999", "fullName": "Bé Na", "birthYear": 2010},
    ).json()["data"]
    assert data["registered"] is False
    assert data["reason"] == "Chưa đủ 18 tuổi tính đến ngày bầu cử (24/05/2026)"


def test_check_voter_unknown(client):
    data = client.post(
        "/api/elections/check-voter",
        json={"idNumber": "999", "fullName": "Ai Đó", "birthYear": 1970},
    ).json()["data"]
    assert data["reason"] == "Không tìm thấy thông tin trong cơ sở dữ liệu"


def test_check_voter_missing_fields(client):
    for payload in ({"idNumber": "1", "fullName": "A"}, {"idNumber": "1", "fullName": "A", "birthYear": "năm"}):
        response = client.post("/api/elections/check-voter", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Vui lòng cung cấp đầy đủ thông tin (CCCD, họ tên, năm sinh)"


def test_polling_stations(client):
    body = client.get("/api/elections/polling-stations", params={"province": "hồ chí minh"}).json()
    assert body["total"] == 2
    assert {s["id"] for s in body["data"]} == {3, 4}

    body = client.get("/api/elections/polling-stations", params={"district": "hoàn kiếm", "ward": "hàng bông"}).json()
    assert [s["id"] for s in body["data"]] == [2]

    assert client.get("/api/elections/polling-stations").json()["total"] == 4


def test_news_limit(client):
    assert len(client.get("/api/elections/news").json()["data"]) == 5
    assert len(client.get("/api/elections/news", params={"limit": 2}).json()["data"]) == 2


def test_candidates(client):
    assert len(client.get("/api/elections/candidates").json()["data"]) == 2
    data = client.get("/api/elections/candidates", params={"constituency": "phú nhuận"}).json()["data"]
    assert data == []


def test_statistics(client):
    data = client.get("/api/elections/statistics").json()["data"]
    assert data["nationalAssemblySeats"] == 500
    assert "lastUpdated" in data


def test_faq(client):
    body = client.get("/api/elections/faq").json()
    assert len(body["data"]) == 10
    assert len(body["categories"]) == 7
    body = client.get("/api/elections/faq", params={"category": "voter"}).json()
    assert [f["id"] for f in body["data"]] == [2, 3]


def test_calendar(client):
    data = client.get("/api/elections/calendar").json()["data"]
    assert [e["type"] for e in data if e["type"] == "election-day"] == ["election-day"]


def test_feedback(client, store):
    body = client.post(
        "/api/elections/feedback",
        json={
            "type": "violation",
            "subject": "Niêm yết chậm",
            "description": "Danh sách cử tri chưa được niêm yết",
            "contactEmail": "a@b.vn",
            "anonymous": True,
        },
    ).json()
    assert re.fullmatch(r"FB\d{8}", body["data"]["ticketCode"])
    assert body["data"]["status"] == "received"
    stored = store.feedback.snapshot()[0]
    assert stored["contactEmail"] == ""
    assert stored["anonymous"] is True


def test_feedback_missing_fields(client):
    response = client.post("/api/elections/feedback", json={"type": "other"})
    assert response.status_code == 400
    assert response.json()["message"] == "Vui lòng cung cấp đầy đủ thông tin (loại, tiêu đề, mô tả)"


def test_results_endpoint(client):
    data = client.get("/api/elections/results").json()["data"]
    assert data["status"] in {"not-started", "counting"}


def test_results_before_and_after_election(store):
    service = ElectionService(store, "2026-05-24T07:00:00")
    before = asyncio.run(service.results(now=datetime(2026, 5, 20, 6, 0)))
    assert before["status"] == "not-started"
    assert before["countdown"] == 4
    assert before["electionDate"] == "2026-05-24"
    after = asyncio.run(service.results(now=datetime(2026, 5, 25)))
    assert after["status"] == "counting"

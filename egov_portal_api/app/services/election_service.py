"""
Service layer for the election section.

The election pages are informational: news, candidates, polling
stations, FAQ, calendar and statistics all come from the demo content
loaded from ``demo.json``.  Citizens can also subscribe to
notifications, check whether they are on the (demo) voter list and
send feedback about the election process.

Voter data is illustrative only; no real registry is queried.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from egov_portal_api.app.core import query
from egov_portal_api.app.core.clock import now_iso
from egov_portal_api.app.core.errors import ValidationError
from egov_portal_api.app.core.store import DataStore, Record
from egov_portal_api.app.core.validation import (
    MSG_EMAIL_OR_PHONE,
    MSG_FEEDBACK_REQUIRED,
    MSG_VOTER_REQUIRED,
    is_blank,
    parse_birth_year,
    require,
)
from egov_portal_api.app.schemas.election import FeedbackCreate, SubscriptionCreate, VoterCheck


logger = logging.getLogger(__name__)

MSG_ALREADY_SUBSCRIBED = "Email hoặc số điện thoại đã được đăng ký"
VOTING_AGE = 18

REASON_UNDER_AGE = "Chưa đủ 18 tuổi tính đến ngày bầu cử ({date})"
SUGGESTION_UNDER_AGE = "Bạn sẽ đủ điều kiện bầu cử khi đủ 18 tuổi."
REASON_NOT_FOUND = "Không tìm thấy thông tin trong cơ sở dữ liệu"
SUGGESTION_NOT_FOUND = "Vui lòng liên hệ UBND xã/phường nơi cư trú để đăng ký hoặc kiểm tra lại thông tin."
REASON_MISMATCH = "Thông tin không khớp"
SUGGESTION_MISMATCH = "Vui lòng kiểm tra lại họ tên và năm sinh. Nếu cần hỗ trợ, liên hệ UBND xã/phường."


class ElectionService:
    """Election information, subscriptions, voter checks and feedback."""

    def __init__(self, store: DataStore, election_date: str) -> None:
        self.store = store
        self.election_date = datetime.fromisoformat(election_date)

    async def overview(self) -> Record:
        return dict(self.store.elections)

    async def subscribe(self, data: SubscriptionCreate) -> Record:
        """Register an email and/or phone for election notifications.

        Raises
        ------
        ValidationError
            If neither email nor phone is given, or if either is
            already subscribed.
        """
        if is_blank(data.email) and is_blank(data.phone):
            raise ValidationError(MSG_EMAIL_OR_PHONE)
        email = (data.email or "").strip()
        phone = (data.phone or "").strip()
        subscription = {
            "id": self.store.subscriptions.next_id(),
            "code": self.store.subscription_codes.next_code(),
            "email": email,
            "phone": phone,
            "name": data.name or "",
            "province": data.province or "",
            "district": data.district or "",
            "ward": data.ward or "",
            "createdAt": now_iso(),
            "status": "active",
        }

        def taken(existing: Record) -> bool:
            return bool((email and existing["email"] == email) or (phone and existing["phone"] == phone))

        if not self.store.subscriptions.append_unless(taken, subscription):
            raise ValidationError(MSG_ALREADY_SUBSCRIBED)
        logger.info("Election subscription %s created", subscription["code"])
        return dict(subscription)

    async def check_voter(self, data: VoterCheck) -> Dict[str, Any]:
        """Look a citizen up in the demo voter list.

        Unknown citizens get a "not registered" answer whose reason
        depends on their age on election day; known citizens must also
        match on name (ignoring case) and birth year.
        """
        require([data.id_number, data.full_name, data.birth_year], MSG_VOTER_REQUIRED)
        birth_year = parse_birth_year(data.birth_year)
        voters = {v["idNumber"]: v for v in self.store.demo_items("voters")}
        voter = voters.get(data.id_number.strip())

        if voter is None:
            if self.election_date.year - birth_year < VOTING_AGE:
                return {
                    "registered": False,
                    "reason": REASON_UNDER_AGE.format(date=self.election_date.strftime("%d/%m/%Y")),
                    "suggestion": SUGGESTION_UNDER_AGE,
                }
            return {"registered": False, "reason": REASON_NOT_FOUND, "suggestion": SUGGESTION_NOT_FOUND}

        if voter["fullName"].lower() != data.full_name.strip().lower() or voter["birthYear"] != birth_year:
            return {"registered": False, "reason": REASON_MISMATCH, "suggestion": SUGGESTION_MISMATCH}

        return {"registered": True, "voter": voter}

    async def polling_stations(
        self,
        province: Optional[str] = None,
        district: Optional[str] = None,
        ward: Optional[str] = None,
    ) -> List[Record]:
        return query.filter_contains(
            self.store.demo_items("pollingStations"), province=province, district=district, ward=ward
        )

    async def news(self, limit: int = 10) -> List[Record]:
        return self.store.demo_items("electionNews")[:limit]

    async def candidates(self, constituency: Optional[str] = None, position: Optional[str] = None) -> List[Record]:
        return query.filter_contains(
            self.store.demo_items("candidates"), constituency=constituency, position=position
        )

    async def statistics(self) -> Record:
        stats = dict(self.store.demo.get("electionStatistics") or {})
        stats["lastUpdated"] = now_iso()
        return stats

    async def faq(self, category: Optional[str] = None) -> List[Record]:
        return query.filter_equal(self.store.demo_items("electionFaq"), category=category)

    async def faq_categories(self) -> List[Record]:
        return self.store.demo_items("faqCategories")

    async def calendar(self) -> List[Record]:
        return self.store.demo_items("electionCalendar")

    async def submit_feedback(self, data: FeedbackCreate) -> Record:
        """Store a voter's report.  Anonymous reports drop contact details."""
        require([data.type, data.subject, data.description], MSG_FEEDBACK_REQUIRED)
        feedback = {
            "id": self.store.feedback.next_id(),
            "ticketCode": self.store.feedback_codes.next_code(),
            "type": data.type,
            "subject": data.subject,
            "description": data.description,
            "location": data.location or "",
            "contactEmail": "" if data.anonymous else (data.contact_email or ""),
            "contactPhone": "" if data.anonymous else (data.contact_phone or ""),
            "anonymous": data.anonymous,
            "status": "received",
            "createdAt": now_iso(),
        }
        stored = self.store.feedback.append(feedback)
        logger.info("Election feedback %s received (type=%s)", feedback["ticketCode"], data.type)
        return stored

    async def results(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Return the live results placeholder.

        Before election day the payload carries the number of whole days
        left; afterwards it reports that counting is in progress.
        """
        now = now or datetime.now()
        if now < self.election_date:
            days_left = math.floor((self.election_date - now).total_seconds() / 86400)
            return {
                "status": "not-started",
                "message": "Kết quả bầu cử sẽ được cập nhật vào ngày {}".format(
                    self.election_date.strftime("%d/%m/%Y")
                ),
                "electionDate": self.election_date.date().isoformat(),
                "countdown": days_left,
            }
        return {
            "status": "counting",
            "lastUpdated": now_iso(),
            "nationalAssembly": {"totalSeats": 500, "counted": 0, "turnout": 0},
            "byProvince": [],
            "message": "Đang kiểm phiếu...",
        }

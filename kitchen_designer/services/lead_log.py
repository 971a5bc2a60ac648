"""리드(상담 요청자) 기록"""
from datetime import datetime, timezone
from typing import Any, Dict

from ..models.schemas import Contact, Preferences
from ..utils.logger import logger


LEAD_SOURCE = "AI Kitchen Designer"


class LeadLogger:
    """로거로 리드를 남기는 LeadSink 구현 (CRM 연동은 별도 구현으로 교체)"""

    def record(self, contact: Contact, preferences: Preferences) -> Dict[str, Any]:
        lead = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "name": contact.name,
            "email": contact.email,
            "phone": contact.phone or "Not provided",
            "preferences": {
                "style": preferences.kitchen_style,
                "budget": preferences.budget_range,
                "cooking": preferences.cooking_habits,
                "family": preferences.family_size,
                "storage": preferences.storage_needs,
            },
            "source": LEAD_SOURCE,
        }
        logger.info(f"New lead captured: {lead}")
        return lead

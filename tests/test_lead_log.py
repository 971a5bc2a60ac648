import logging

from kitchen_designer.models.schemas import Contact
from kitchen_designer.services.lead_log import LeadLogger


def test_lead_record_shape(contact, preferences):
    lead = LeadLogger().record(contact, preferences)

    assert lead["name"] == "Jordan Lee"
    assert lead["email"] == "jordan@example.com"
    assert lead["phone"] == "403-555-0100"
    assert lead["source"] == "AI Kitchen Designer"
    assert lead["preferences"] == {
        "style": "modern",
        "budget": "60k-80k",
        "cooking": "daily-cook",
        "family": "large-family",
        "storage": "maximum-storage",
    }
    assert lead["timestamp"].endswith("+00:00")


def test_missing_phone_defaults(preferences):
    lead = LeadLogger().record(Contact(name="Sam", email="sam@example.com"), preferences)

    assert lead["phone"] == "Not provided"


def test_lead_is_logged(contact, preferences, caplog):
    with caplog.at_level(logging.INFO, logger="kitchen_designer"):
        LeadLogger().record(contact, preferences)

    assert any("New lead captured" in record.getMessage() for record in caplog.records)

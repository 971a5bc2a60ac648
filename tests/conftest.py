"""공용 픽스처: 외부 AI 기능 대역(fake)과 기본 선호도"""

import pytest

from kitchen_designer.models.schemas import Contact, Preferences
from kitchen_designer.services.ports import ImageInput


class FakeSynthesizer:
    """호출 순서(1부터)로 실패/빈 응답을 지정할 수 있는 이미지 합성 대역"""

    def __init__(self, fail_on=(), empty_on=()):
        self.fail_on = set(fail_on)
        self.empty_on = set(empty_on)
        self.prompts = []

    async def synthesize(self, prompt: str) -> str:
        self.prompts.append(prompt)
        call = len(self.prompts)
        if call in self.fail_on:
            raise RuntimeError("synthesis backend unavailable")
        if call in self.empty_on:
            return ""
        return f"https://images.example.com/design-{call}.png"


class FakeVision:
    def __init__(self, text: str = "An L-shaped layout with a large window."):
        self.text = text
        self.calls = []

    async def analyze(self, image: ImageInput, prompt: str) -> str:
        self.calls.append((image, prompt))
        return self.text


class RecordingLeadSink:
    def __init__(self):
        self.leads = []

    def record(self, contact, preferences):
        lead = {"name": contact.name, "style": preferences.kitchen_style}
        self.leads.append(lead)
        return lead


@pytest.fixture
def preferences_payload():
    return {
        "kitchenStyle": "modern",
        "colorPreference": "warm-wood",
        "budgetRange": "60k-80k",
        "storageNeeds": "maximum-storage",
        "cookingHabits": "daily-cook",
        "familySize": "large-family",
    }


@pytest.fixture
def contact_payload():
    return {"name": "Jordan Lee", "email": "jordan@example.com", "phone": "403-555-0100"}


@pytest.fixture
def preferences(preferences_payload):
    return Preferences.model_validate(preferences_payload)


@pytest.fixture
def contact(contact_payload):
    return Contact.model_validate(contact_payload)


@pytest.fixture
def image():
    return ImageInput(data=b"\xff\xd8\xff fake jpeg bytes", mime_type="image/jpeg")


@pytest.fixture
def synthesizer_factory():
    return FakeSynthesizer


@pytest.fixture
def vision():
    return FakeVision()


@pytest.fixture
def lead_sink():
    return RecordingLeadSink()

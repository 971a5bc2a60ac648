import json

import pytest

from kitchen_designer.models.schemas import AnalyzeResult, FailureResult, GenerateResult
from kitchen_designer.services.design_service import KITCHEN_ANALYSIS_PROMPT, KitchenDesignService


class ExplodingVision:
    async def analyze(self, image, prompt):
        raise ConnectionError("vision transport down")


@pytest.fixture
def service_factory(vision, lead_sink, synthesizer_factory):
    def build(synthesizer=None, vision_impl=None):
        return KitchenDesignService(
            vision=vision_impl or vision,
            synthesizer=synthesizer or synthesizer_factory(),
            lead_sink=lead_sink,
        )
    return build


@pytest.mark.asyncio
async def test_analyze_calls_vision_once(service_factory, vision, image):
    result = await service_factory().handle("analyze", image)

    assert isinstance(result, AnalyzeResult)
    assert len(vision.calls) == 1
    assert vision.calls[0] == (image, KITCHEN_ANALYSIS_PROMPT)

    payload = result.to_response()
    assert payload["success"] is True
    assert payload["originalAnalysis"] == vision.text
    assert payload["spaceAnalysis"]["layoutType"] == "an l-shaped layout with a large window."
    assert "Natural lighting from windows" in payload["spaceAnalysis"]["existingFeatures"]


@pytest.mark.asyncio
async def test_empty_analysis_degrades_to_placeholder(service_factory, vision, image):
    vision.text = ""
    result = await service_factory().handle("analyze", image)

    assert result.original_analysis == "Analysis not available"
    assert result.space_analysis.layout_type == "Standard kitchen layout"


@pytest.mark.asyncio
async def test_generate_from_json_strings(service_factory, lead_sink, image, preferences_payload, contact_payload):
    result = await service_factory().handle(
        "generate",
        image,
        preferences=json.dumps(preferences_payload),
        contact=json.dumps(contact_payload),
    )

    assert isinstance(result, GenerateResult)
    assert len(result.designs) == 3
    assert result.message == "Generated 3 personalized kitchen designs for Urban Woodspace!"
    assert lead_sink.leads == [{"name": "Jordan Lee", "style": "modern"}]


@pytest.mark.asyncio
async def test_generate_message_reflects_partial_failure(
    service_factory, synthesizer_factory, image, preferences, contact
):
    service = service_factory(synthesizer=synthesizer_factory(fail_on={3}))
    result = await service.handle("generate", image, preferences=preferences, contact=contact)

    payload = result.to_response()
    assert payload["stats"] == {"imagesGenerated": 2, "imagesFailed": 1}
    assert payload["message"] == "Generated 2 personalized kitchen designs for Urban Woodspace!"
    assert payload["designs"][2]["imageStatus"] == "failed"


@pytest.mark.asyncio
async def test_invalid_action_makes_no_capability_call(service_factory, synthesizer_factory, vision, lead_sink, image):
    synthesizer = synthesizer_factory()
    result = await service_factory(synthesizer=synthesizer).handle("delete", image)

    assert isinstance(result, FailureResult)
    assert result.to_response() == {"success": False, "error": "Invalid action"}
    assert vision.calls == []
    assert synthesizer.prompts == []
    assert lead_sink.leads == []


@pytest.mark.asyncio
async def test_malformed_preferences_become_generic_failure(service_factory, lead_sink, image, contact_payload):
    result = await service_factory().handle(
        "generate", image, preferences="{not json", contact=json.dumps(contact_payload)
    )

    assert result.to_response() == {"success": False, "error": "Failed to process request. Please try again."}
    assert lead_sink.leads == []


@pytest.mark.asyncio
async def test_missing_preference_field_becomes_generic_failure(service_factory, image, contact_payload):
    result = await service_factory().handle(
        "generate", image, preferences={"kitchenStyle": "modern"}, contact=contact_payload
    )

    assert isinstance(result, FailureResult)


@pytest.mark.asyncio
async def test_vision_transport_error_becomes_generic_failure(service_factory, image):
    result = await service_factory(vision_impl=ExplodingVision()).handle("analyze", image)

    assert result.error == "Failed to process request. Please try again."


@pytest.mark.asyncio
async def test_generate_passes_upload_through_unencoded(service_factory, image, preferences, contact, monkeypatch):
    service = service_factory()
    seen = []
    run = service.orchestrator.run

    async def recording_run(prefs, original_image=None):
        seen.append(original_image)
        return await run(prefs, original_image)

    monkeypatch.setattr(service.orchestrator, "run", recording_run)
    await service.handle("generate", image, preferences=preferences, contact=contact)

    assert seen == [image]
    assert seen[0].data == b"\xff\xd8\xff fake jpeg bytes"

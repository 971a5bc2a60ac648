from kitchen_designer.services.analysis_extractor import (
    AnalysisField,
    extract_line,
    extract_space_analysis,
)

NO_SIGNAL_TEXT = "The cabinets are painted blue.\nThe counters are granite."


def test_defaults_when_no_keywords():
    analysis = extract_space_analysis(NO_SIGNAL_TEXT)

    assert analysis.room_dimensions == "Approximately 10' x 12' kitchen space"
    assert analysis.layout_type == "Standard kitchen layout"
    assert analysis.lighting_situation == "Natural light from windows"
    assert analysis.existing_features == ["Natural lighting", "Standard ceiling height", "Existing flooring"]
    assert analysis.challenges == ["Space optimization needed", "Storage improvements", "Lighting updates"]
    assert analysis.recommended_styles == ["Contemporary", "Traditional", "Transitional"]
    assert len(analysis.opportunities) == 5
    assert len(analysis.architectural_elements) == 4
    assert len(analysis.space_optimization) == 4


def test_extraction_is_idempotent():
    assert extract_space_analysis(NO_SIGNAL_TEXT) == extract_space_analysis(NO_SIGNAL_TEXT)


def test_empty_text_still_fully_populated():
    analysis = extract_space_analysis("")

    for value in analysis.model_dump().values():
        assert value


def test_window_small_kitchen_limited_storage():
    text = "Large window over the sink.\nThis is a small kitchen with limited storage."
    analysis = extract_space_analysis(text)

    assert "Natural lighting from windows" in analysis.existing_features
    assert "Limited space optimization" in analysis.challenges
    assert "Insufficient storage" in analysis.challenges
    assert analysis.lighting_situation == "large window over the sink."


def test_first_matching_line_is_returned_lowercased():
    text = (
        "Overview of the space\n"
        "  The room is roughly 12' x 14' with a Galley layout.  \n"
        "Bright southern exposure."
    )

    assert extract_line(text, AnalysisField.DIMENSIONS) == "the room is roughly 12' x 14' with a galley layout."
    assert extract_line(text, AnalysisField.LAYOUT) == "the room is roughly 12' x 14' with a galley layout."
    assert extract_line(text, AnalysisField.LIGHTING) == "bright southern exposure."


def test_measurement_pattern_without_keywords():
    assert extract_line("Roughly 10 x 12 overall", AnalysisField.DIMENSIONS) == "roughly 10 x 12 overall"
    assert extract_line("An extra pantry next door", AnalysisField.DIMENSIONS) is None


def test_recommended_styles_from_keywords():
    analysis = extract_space_analysis("A rustic feel would suit it; classic trim throughout.")

    assert analysis.recommended_styles == ["Traditional", "Farmhouse"]


def test_outdated_and_lighting_challenges():
    analysis = extract_space_analysis("Dated oak cabinets and poor lighting.")

    assert analysis.challenges == ["Outdated design elements", "Lighting improvements needed"]


def test_feature_rules_keep_declared_order():
    analysis = extract_space_analysis("Door to the hall, tile floor, 9 ft ceiling, one window.")

    assert analysis.existing_features == [
        "Natural lighting from windows",
        "Standard ceiling height",
        "Existing flooring",
        "Door access points",
    ]

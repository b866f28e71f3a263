from services.section_parser import (
    SectionSpec,
    find_field_value,
    find_section,
    non_empty_lines,
    normalize_text,
)


DOC = """Staff Engineer
Overview
Builds the data platform.
Responsibilities
- Own ingestion
Requirements
- 8 years
"""


# --- Normalizer ---

def test_normalize_text_crlf_and_cr():
    assert normalize_text("a\r\nb\rc\nd") == "a\nb\nc\nd"


def test_normalize_text_leaves_other_whitespace():
    assert normalize_text("  a\t\n\nb  ") == "  a\t\n\nb  "


def test_non_empty_lines():
    assert non_empty_lines("  one \r\n\r\n two\n   \nthree") == ["one", "two", "three"]


# --- Section locator ---

def test_find_section_between_headers():
    spec = SectionSpec(("Overview",), ("Responsibilities",))
    assert find_section(DOC, spec) == "Builds the data platform."


def test_find_section_case_insensitive():
    spec = SectionSpec(("OVERVIEW",), ("responsibilities",))
    assert find_section(DOC, spec) == "Builds the data platform."


def test_find_section_missing_start_is_none():
    spec = SectionSpec(("Role Summary",), ("Responsibilities",))
    assert find_section(DOC, spec) is None


def test_find_section_runs_to_end_without_end_header():
    spec = SectionSpec(("Requirements",), ("Benefits", "Perks"))
    assert find_section(DOC, spec) == "- 8 years"


def test_find_section_no_start_headers_begins_at_top():
    spec = SectionSpec(None, ("Overview",))
    assert find_section(DOC, spec) == "Staff Engineer"


def test_find_section_require_end():
    spec = SectionSpec(None, ("Location",), require_end=True)
    assert find_section(DOC, spec) is None


def test_find_section_closest_end_header_wins():
    # "Requirements" is listed first but "Responsibilities" comes first in the text
    spec = SectionSpec(("Overview",), ("Requirements", "Responsibilities"))
    assert find_section(DOC, spec) == "Builds the data platform."


def test_find_section_none_end_entries_ignored():
    spec = SectionSpec(("Overview",), (None, "Responsibilities", None))
    assert find_section(DOC, spec) == "Builds the data platform."


def test_find_section_header_must_start_line():
    text = "Intro mentions Responsibilities inline\nResponsibilities\n- Real item\n"
    spec = SectionSpec(("Responsibilities",), ())
    assert find_section(text, spec) == "- Real item"


def test_find_section_header_on_first_line():
    text = "Overview\nFirst line section\nDuties\nx"
    spec = SectionSpec(("Overview",), ("Duties",))
    assert find_section(text, spec) == "First line section"


def test_find_section_empty_span_is_none():
    text = "Overview\n   \nResponsibilities\n"
    spec = SectionSpec(("Overview",), ("Responsibilities",))
    # Empty overview runs on until the next end header after it: none left
    assert find_section(text, spec) == "Responsibilities"
    assert find_section("Overview\n   \n", spec) is None


def test_find_section_uses_first_occurrence_of_repeated_header():
    text = "Overview\nfirst\nDuties\nOverview\nsecond\nDuties\n"
    spec = SectionSpec(("Overview",), ("Duties",))
    assert find_section(text, spec) == "first"


def test_find_section_document_order_beats_synonym_order():
    text = "Key Responsibilities\n- early\nRequirements\nResponsibilities\n- late\n"
    spec = SectionSpec(("Responsibilities", "Key Responsibilities"), ("Requirements",))
    assert find_section(text, spec) == "- early"


def test_find_section_synonym_order_strategy():
    text = "Key Responsibilities\n- early\nRequirements\nResponsibilities\n- late\n"
    spec = SectionSpec(
        ("Responsibilities", "Key Responsibilities"),
        ("Requirements",),
        start_strategy="synonym_order",
    )
    assert find_section(text, spec) == "- late"


def test_find_section_regex_characters_are_literal():
    text = "Skills (Core)\nPython\nOther\n"
    spec = SectionSpec(("Skills (Core)",), ("Other",))
    assert find_section(text, spec) == "Python"


# --- Label scan ---

def test_find_field_value_colon():
    assert find_field_value("Title\nLocation: Remote\n", ("Location:", "Location")) == "Remote"


def test_find_field_value_dash_and_case():
    assert find_field_value("location - Berlin, DE\n", ("Location",)) == "Berlin, DE"


def test_find_field_value_label_order():
    text = "Reporting to: Head of Data\nReports to: CTO\n"
    assert find_field_value(text, ("Reports to:", "Reporting to:")) == "CTO"


def test_find_field_value_requires_line_start():
    assert find_field_value("Our Location: varies\n", ("Location:",)) is None


def test_find_field_value_falls_back_to_next_line():
    assert find_field_value("Location:\n\n  Remote  \nRole Summary\n", ("Location:", "Location")) == "Remote"


def test_find_field_value_label_at_end_is_none():
    assert find_field_value("Title\nLocation:\n   \n", ("Location:", "Location")) is None


def test_find_field_value_missing():
    assert find_field_value("nothing here", ("Location:",)) is None

from models.schemas.sections import DetectedSection
from services.section_detector import detect_sections
from services.section_grader import (
    BASE_SECTION_SCORE,
    extract_section_body,
    grade_section,
    grade_sections,
)


# --- Body extraction ---

def test_body_stops_at_blank_line():
    text = "Skills\nPython, Java\n\nEducation\nState University, 2019"
    assert extract_section_body("skills", text) == "Skills\nPython, Java"


def test_body_runs_to_end_of_text():
    text = "Education\nState University, 2019"
    assert extract_section_body("education", text) == text


def test_body_missing_anchor():
    # detected via "University" but the heading rule never matches
    assert extract_section_body("education", "State University") is None


def test_grade_sections_skips_sections_without_body():
    sections = [DetectedSection(name="education", confidence=0.3)]
    assert grade_sections(sections, "Graduated from State University") == []


# --- Per-section rules ---

def test_summary_too_brief():
    result = grade_section("summary", "Summary\nBackend engineer.")
    assert result.issues == ["too brief", "too short"]
    assert result.score == BASE_SECTION_SCORE - 20 - 25
    assert len(result.recommendations) == 2


def test_summary_too_verbose():
    body = "Summary " + " ".join(["word"] * 160)
    result = grade_section("summary", body)
    assert result.issues == ["too verbose"]
    assert result.score == BASE_SECTION_SCORE - 15
    assert result.word_count == 161


def test_summary_in_range_has_no_issues():
    body = "Summary " + " ".join(["word"] * 40)
    result = grade_section("summary", body)
    assert result.issues == []
    assert result.score == BASE_SECTION_SCORE


def test_experience_without_bullets_or_verbs():
    body = "Experience\nWorked at a shop for several years helping customers with their daily questions"
    result = grade_section("experience", body)
    assert result.issues == ["insufficient detail", "lacks action verbs"]
    assert result.score == BASE_SECTION_SCORE - 30


def test_experience_with_bullets_and_verbs():
    body = (
        "Experience\n"
        "• Led a team of four\n"
        "• Developed billing features\n"
        "• Improved test coverage across services"
    )
    result = grade_section("experience", body)
    assert result.issues == []
    assert result.score == BASE_SECTION_SCORE


def test_skills_too_few_items():
    result = grade_section("skills", "Skills\nPython, Java")
    assert result.issues == ["limited skills listed", "too short"]
    assert result.score == BASE_SECTION_SCORE - 20 - 25


def test_skills_enough_items():
    body = "Skills\nPython, Java, SQL, Docker, AWS, React, Git, Linux, Redis, Kafka"
    result = grade_section("skills", body)
    assert result.issues == []


def test_education_missing_year():
    body = "Education\nBachelor of Science in Biology at the State University of Somewhere"
    result = grade_section("education", body)
    assert result.issues == ["missing graduation years"]
    assert result.score == BASE_SECTION_SCORE - 10


def test_education_year_out_of_range_does_not_count():
    body = "Education\nBachelor of Science in Biology, State University of Somewhere, 1899"
    assert "missing graduation years" in grade_section("education", body).issues


def test_contact_is_exempt_from_length_rule():
    result = grade_section("contact", "jane@example.com")
    assert result.issues == []
    assert result.score == BASE_SECTION_SCORE


def test_other_sections_short_penalty():
    result = grade_section("projects", "Projects\nA chess engine")
    assert result.issues == ["too short"]
    assert result.score == BASE_SECTION_SCORE - 25


def test_penalties_accumulate_without_floor():
    result = grade_section("experience", "Experience")
    assert result.score == BASE_SECTION_SCORE - 15 - 15 - 25
    assert result.word_count == 1


def test_strong_cv_sections_are_clean(strong_cv):
    results = grade_sections(detect_sections(strong_cv), strong_cv)
    by_name = {r.name: r for r in results}
    assert set(by_name) == {"contact", "summary", "experience", "skills", "education"}
    for result in results:
        assert result.issues == []
        assert result.score == BASE_SECTION_SCORE

"""
Unit tests for résumé analysis heuristics.

Each heuristic is tested on plain text; analyze() is tested on hand-built
ParsedDocuments so segmentation behavior does not leak into these tests.
"""

import pytest

from apptrack.contexts.analysis import analyzer
from apptrack.contexts.analysis.analysis_data_structure import EducationLevel
from apptrack.contexts.analysis.analysis_patterns import (
    COMMON_SKILLS,
    SUGGESTION_ACTION_VERBS,
    SUGGESTION_ADD_SUMMARY,
    SUGGESTION_EXPAND_SKILLS,
    SUGGESTION_QUANTIFY,
)
from apptrack.contexts.analysis.analyzer import (
    analyze,
    classify_education,
    estimate_experience_years,
    extract_skills,
    find_missing_keywords,
    generate_suggestions,
    has_action_verbs,
    has_quantifiable_achievements,
)
from apptrack.contexts.intake.document_data_structure import (
    ParsedDocument,
    Section,
    SectionCategory,
)
from apptrack.contexts.intake.segmenter import segment
from apptrack.utils.config import ParserConfig


def make_document(*sections, text=None):
    """Build a ParsedDocument from (category, body) pairs."""
    built = tuple(Section(category, category.value.title(), body) for category, body in sections)
    if text is None:
        text = "\n\n".join(f"{s.title}\n{s.body}" for s in built)
    return ParsedDocument(sections=built, normalized_text=text)


@pytest.mark.unit
class TestExtractSkills:
    """Tests for dictionary skill matching."""

    def test_case_insensitive_with_dictionary_spelling(self):
        assert extract_skills("I know PYTHON and react.js") == ["Python", "React"]

    def test_no_match_inside_longer_words(self):
        assert extract_skills("JavaScript and PostgreSQL") == ["JavaScript", "PostgreSQL"]

    def test_output_follows_dictionary_order(self):
        assert extract_skills("Git, Docker, Python") == ["Python", "Docker", "Git"]

    def test_each_skill_reported_once(self):
        assert extract_skills("Python python PYTHON") == ["Python"]

    def test_symbol_skills(self):
        assert extract_skills("Wrote C++ and C# services") == ["C++", "C#"]

    def test_multi_word_and_dotted_skills(self):
        assert extract_skills("Machine Learning and Problem Solving") == [
            "Machine Learning",
            "Problem Solving",
        ]
        assert extract_skills("Node.js backend") == ["Node.js"]

    def test_no_skills(self):
        assert extract_skills("") == []


@pytest.mark.unit
def test_find_missing_keywords():
    assert find_missing_keywords(["Python", "Git", "Docker"]) == [
        "JavaScript",
        "SQL",
        "AWS",
        "React",
        "Agile",
    ]
    assert find_missing_keywords(list(COMMON_SKILLS)) == []


@pytest.mark.unit
class TestEstimateExperienceYears:
    """Tests for the experience-years estimate."""

    def test_explicit_phrase_wins_over_ranges(self):
        assert estimate_experience_years("5 years of experience; Acme 2010-2023") == 5

    def test_plus_suffix(self):
        assert estimate_experience_years("10+ years building APIs") == 10

    def test_singular_year(self):
        assert estimate_experience_years("1 year at a startup") == 1

    def test_longest_single_range(self):
        text = "Acme 2019-2021\nGlobex 2012-2018"
        assert estimate_experience_years(text, current_year=2025) == 6

    def test_open_ended_range_uses_current_year(self):
        assert estimate_experience_years("Acme 2020 - Present", current_year=2025) == 5
        assert estimate_experience_years("Acme 2021–current", current_year=2025) == 4

    def test_current_year_defaults_to_today(self, monkeypatch):
        monkeypatch.setattr(analyzer, "_current_year", lambda: 2030)
        assert estimate_experience_years("Acme 2020 - now") == 10

    def test_reversed_range_is_ignored(self):
        assert estimate_experience_years("Acme 2023-2019", current_year=2025) is None

    def test_no_signal(self):
        assert estimate_experience_years("Worked on many things") is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("PhD in Physics", EducationLevel.PHD),
        ("Ph.D. Chemistry", EducationLevel.PHD),
        ("Doctorate, MIT", EducationLevel.PHD),
        ("Master of Science", EducationLevel.MASTERS),
        ("MSc Data Science", EducationLevel.MASTERS),
        ("Bachelor of Arts", EducationLevel.BACHELORS),
        ("BS Computer Science", EducationLevel.BACHELORS),
        ("Associate of Applied Science", EducationLevel.ASSOCIATES),
        ("High school diploma", EducationLevel.ASSOCIATES),
        # Highest degree wins
        ("BS Physics, MS Computer Science, PhD candidate", EducationLevel.PHD),
        ("BS and MS in Mathematics", EducationLevel.MASTERS),
        ("Coursework in algorithms", None),
        ("", None),
    ],
)
def test_classify_education(text, expected):
    assert classify_education(text) == expected


@pytest.mark.unit
class TestSuggestionSignals:
    """Tests for the achievement and action-verb checks."""

    @pytest.mark.parametrize(
        "text",
        ["Cut latency by 30%", "Grew revenue 3x", "Saved $2M a year", "Improved uptime"],
    )
    def test_quantifiable(self, text):
        assert has_quantifiable_achievements(text)

    def test_not_quantifiable(self):
        assert not has_quantifiable_achievements("Wrote code for the team")

    def test_action_verbs(self):
        assert has_action_verbs("Led a team of four")
        assert has_action_verbs("DESIGNED the billing system")

    def test_action_verbs_are_whole_words(self):
        assert not has_action_verbs("Misled nobody")
        assert not has_action_verbs("Improved API latency")


@pytest.mark.unit
class TestGenerateSuggestions:
    """Each suggestion condition is independent of the others."""

    FIVE_SKILLS = ["Python", "Go", "SQL", "Docker", "Git"]
    STRONG_TEXT = "Summary\nLed a migration that reduced costs by 20%."

    def test_no_suggestions_when_everything_present(self):
        document = make_document((SectionCategory.SUMMARY, "Engineer."), text=self.STRONG_TEXT)
        assert generate_suggestions(document, self.FIVE_SKILLS) == []

    def test_missing_summary(self):
        document = make_document((SectionCategory.SKILLS, "Python"), text=self.STRONG_TEXT)
        assert generate_suggestions(document, self.FIVE_SKILLS) == [SUGGESTION_ADD_SUMMARY]

    def test_too_few_skills(self):
        document = make_document((SectionCategory.SUMMARY, "Engineer."), text=self.STRONG_TEXT)
        assert generate_suggestions(document, self.FIVE_SKILLS[:4]) == [SUGGESTION_EXPAND_SKILLS]

    def test_no_quantifiable_achievement(self):
        document = make_document(
            (SectionCategory.SUMMARY, "Engineer."), text="Summary\nLed a migration."
        )
        assert generate_suggestions(document, self.FIVE_SKILLS) == [SUGGESTION_QUANTIFY]

    def test_no_action_verb(self):
        document = make_document(
            (SectionCategory.SUMMARY, "Engineer."), text="Summary\nReduced costs by 20%."
        )
        assert generate_suggestions(document, self.FIVE_SKILLS) == [SUGGESTION_ACTION_VERBS]

    def test_min_skills_is_configurable(self):
        document = make_document((SectionCategory.SUMMARY, "Engineer."), text=self.STRONG_TEXT)
        config = ParserConfig(min_skills=1)
        assert generate_suggestions(document, ["Python"], config) == []


@pytest.mark.unit
class TestAnalyze:
    """Tests for analyze() wiring."""

    def test_empty_document(self):
        result = analyze(segment(""))

        assert result.skills == ()
        assert result.missing_keywords == COMMON_SKILLS
        assert result.experience_years is None
        assert result.education_level is None
        assert result.suggestions == (
            SUGGESTION_ADD_SUMMARY,
            SUGGESTION_EXPAND_SKILLS,
            SUGGESTION_QUANTIFY,
            SUGGESTION_ACTION_VERBS,
        )

    def test_uses_first_experience_and_education_sections(self):
        document = make_document(
            (SectionCategory.EXPERIENCE, "Acme 2019-2021"),
            (SectionCategory.EDUCATION, "BS Physics"),
            (SectionCategory.EXPERIENCE, "Globex 2000-2020"),
            (SectionCategory.EDUCATION, "PhD Physics"),
        )
        result = analyze(document, current_year=2025)

        assert result.experience_years == 2
        assert result.education_level == EducationLevel.BACHELORS

    def test_degree_words_outside_education_are_ignored(self):
        document = make_document((SectionCategory.SUMMARY, "Master of the craft."))
        assert analyze(document).education_level is None

    def test_skills_scan_whole_text(self):
        document = make_document(
            (SectionCategory.SUMMARY, "Python developer."),
            (SectionCategory.OTHER, "Hobby projects in Rust."),
        )
        assert analyze(document).skills == ("Python", "Rust")

    def test_to_dict(self):
        document = make_document(
            (SectionCategory.EDUCATION, "Master of Science"),
            (SectionCategory.EXPERIENCE, "3 years at Acme"),
        )
        data = analyze(document).to_dict()

        assert data["education_level"] == "Master's"
        assert data["experience_years"] == 3
        assert data["skills"] == []
        assert data["missing_keywords"] == list(COMMON_SKILLS)
        assert isinstance(data["suggestions"], list)

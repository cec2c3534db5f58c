import pytest

from services.scores import normalize_score, normalize_scores


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.85, 85),
        (42, 42),
        (150, 100),
        (-5, 0),
        (1, 100),
        (0, 0),
        (0.005, 1),
        (71.5, 72),
        (float("nan"), 0),
        (float("inf"), 100),
    ],
)
def test_normalize_score(value, expected):
    assert normalize_score(value) == expected


def test_only_score_breakdown_is_touched(sample_report):
    result = normalize_scores(sample_report)

    assert result["seo_score_breakdown"] == {
        "title_score": 85,
        "description_score": 64,
        "keyword_density_score": 100,
        "clickability_score": 0,
        "overall_score": 72,
        "feedback": ["Add a number to the title"],
    }
    assert result["keyword_research"]["volume_score"] == 72
    assert result["title_variants"] == sample_report["title_variants"]


def test_input_is_not_mutated(sample_report):
    normalize_scores(sample_report)
    assert sample_report["seo_score_breakdown"]["title_score"] == 0.85


def test_non_numeric_leaves_are_unchanged():
    result = normalize_scores({"seo_score_breakdown": {"title_score": "high", "flag": True, "extra": None}})
    assert result["seo_score_breakdown"] == {"title_score": "high", "flag": True, "extra": None}


@pytest.mark.parametrize("parsed", [None, [], ["a"], "text", {"other": 1}, {"seo_score_breakdown": "n/a"}])
def test_never_fails_on_unexpected_shapes(parsed):
    assert normalize_scores(parsed) == parsed


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0.85", 85),
        ("150", 100),
        ("85", 85),
        (" 42 ", 42),
        ("-5", 0),
    ],
)
def test_numeric_strings_are_normalized(value, expected):
    result = normalize_scores({"seo_score_breakdown": {"title_score": value}})
    assert result["seo_score_breakdown"]["title_score"] == expected


@pytest.mark.parametrize("value", ["", "high", "nan", "inf", "85%"])
def test_non_numeric_strings_are_unchanged(value):
    result = normalize_scores({"seo_score_breakdown": {"title_score": value}})
    assert result["seo_score_breakdown"]["title_score"] == value

from services.length_analyzer import analyze_length


def _words(n: int) -> str:
    return " ".join(["word"] * n)


def test_too_short():
    result = analyze_length(_words(199))
    assert result.issue == "CV is too short"
    assert result.recommendation
    assert result.penalty == 15


def test_empty_text_is_too_short():
    assert analyze_length("").penalty == 15


def test_acceptable_bounds():
    for n in (200, 500, 1000):
        result = analyze_length(_words(n))
        assert result.issue is None
        assert result.recommendation is None
        assert result.penalty == 0


def test_too_long():
    result = analyze_length(_words(1001))
    assert result.issue == "CV may be too lengthy"
    assert result.penalty == 5

import pytest

from keysmith.analyzers.scorer import PasswordScorer, clamp_score
from keysmith.core.models import AnalysisResult, PasswordStrength


def test_empty_password_scores_zero():
    result = PasswordScorer().analyze("")
    assert result == AnalysisResult()
    assert result.score == 0
    assert result.keyword_occurrences == {}


def test_non_string_password_scores_zero():
    assert PasswordScorer().analyze(None).score == 0


def test_mixed_password():
    result = PasswordScorer().analyze("Password123!")
    assert result.length == 12
    assert result.number_count == 3
    assert result.uppercase_count == 1
    assert result.lowercase_count == 7
    assert result.special_char_count == 1
    # -20 length, -1 for the repeated 's'
    assert result.score == 79
    assert result.strength is PasswordStrength.STRONG


def test_long_varied_password_scores_full():
    result = PasswordScorer().analyze("Abcdefgh1234!@#")
    assert result.score == 100
    assert result.strength is PasswordStrength.VERY_STRONG


def test_missing_classes_penalised():
    # no digit (-10), no uppercase (-10), no special (-5)
    assert PasswordScorer().analyze("abcdefghijklmno").score == 75


def test_uppercase_counted_before_folding():
    result = PasswordScorer(case_insensitive=True).analyze("ABCDEFGHIJKLMNO")
    assert result.uppercase_count == 15
    assert result.lowercase_count == 0
    # no digit, no lowercase, no special
    assert result.score == 75


def test_case_folding_affects_repetition():
    password = "AaBbCc123!@#xyz"
    assert PasswordScorer(case_insensitive=True).analyze(password).score == 97
    assert PasswordScorer(case_insensitive=False).analyze(password).score == 100


def test_keywords_counted_and_penalised():
    result = PasswordScorer().analyze("johnJOHN2024!xyz", ["john", "smith", ""])
    assert result.keyword_occurrences == {"john": 2, "smith": 0}
    assert result.total_keyword_matches == 2
    assert result.unique_keyword_matches == 1
    # -4 for repeated j/o/h/n, -1 for repeated '2', -10 for keywords
    assert result.score == 85


def test_keywords_folded_when_case_insensitive():
    result = PasswordScorer().analyze("MyJohnPass1!", ["JOHN"])
    assert result.keyword_occurrences == {"john": 1}


def test_keywords_case_sensitive():
    result = PasswordScorer(case_insensitive=False).analyze("MyJohnPass1!", ["john"])
    assert result.keyword_occurrences == {"john": 0}
    assert result.total_keyword_matches == 0


def test_score_clamped_at_zero():
    assert PasswordScorer().analyze("aaaa").score == 0


@pytest.mark.parametrize(
    "score,expected",
    [(-5, 0), (0, 0), (57, 57), (100, 100), (140, 100)],
)
def test_clamp_score(score, expected):
    assert clamp_score(score) == expected


@pytest.mark.parametrize(
    "score,strength",
    [
        (0, PasswordStrength.VERY_WEAK),
        (19, PasswordStrength.VERY_WEAK),
        (20, PasswordStrength.WEAK),
        (40, PasswordStrength.FAIR),
        (60, PasswordStrength.STRONG),
        (80, PasswordStrength.VERY_STRONG),
    ],
)
def test_strength_bands(score, strength):
    assert PasswordStrength.from_score(score) is strength

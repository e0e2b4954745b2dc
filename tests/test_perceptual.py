from dataclasses import dataclass

import pytest

from core.domain.errors import InvalidFormatError
from core.domain.models import ComplianceGrade, NamedColor, Rgb
from core.services.color_space import parse_hex
from core.services.perceptual import (
    analyze_contrast,
    check_wcag_compliance,
    compliance_grade,
    contrast_ratio,
    format_ratio,
    grade_for_ratio,
    rank_by_similarity,
    relative_luminance,
    similarity_score,
)


def test_relative_luminance_extremes():
    assert relative_luminance(parse_hex("#FFFFFF")) == pytest.approx(1.0)
    assert relative_luminance(parse_hex("#000000")) == 0.0


def test_relative_luminance_monotonic():
    white = relative_luminance(parse_hex("#ffffff"))
    gray = relative_luminance(parse_hex("#777777"))
    black = relative_luminance(parse_hex("#000000"))
    assert white > gray > black


def test_contrast_ratio_maximum():
    assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)


def test_contrast_ratio_identical_colors():
    assert contrast_ratio("#777777", "#777777") == 1.0


def test_contrast_ratio_known_gray():
    # #767676 sobre blanco es el gris más claro que pasa AA.
    assert contrast_ratio("#767676", "#ffffff") == pytest.approx(4.54, abs=0.01)


def test_contrast_ratio_symmetric_and_accepts_rgb():
    a = contrast_ratio("#3b82f6", "#ffffff")
    b = contrast_ratio(Rgb(r=255, g=255, b=255), parse_hex("#3b82f6"))
    assert a == b


@pytest.mark.parametrize("bad", ["#XYZ123", "fff", ""])
def test_contrast_ratio_rejects_malformed(bad):
    with pytest.raises(InvalidFormatError):
        contrast_ratio(bad, "#ffffff")
    with pytest.raises(InvalidFormatError):
        contrast_ratio("#ffffff", bad)


def test_compliance_black_on_white_is_aaa_everywhere():
    result = compliance_grade(contrast_ratio("#000000", "#FFFFFF"))
    assert result.grade is ComplianceGrade.AAA
    assert result.aa.normal and result.aa.large
    assert result.aaa.normal and result.aaa.large
    assert result.passes


def test_compliance_boundaries():
    at_aa = compliance_grade(4.5)
    assert at_aa.grade is ComplianceGrade.AA
    assert at_aa.aa.normal is True
    assert at_aa.aaa.large is True
    assert at_aa.aaa.normal is False

    below = compliance_grade(4.499999)
    assert below.grade is ComplianceGrade.FAIL
    assert below.aa.normal is False
    assert below.aa.large is True

    assert compliance_grade(7).grade is ComplianceGrade.AAA
    assert compliance_grade(7).aaa.normal is True


def test_large_text_thresholds_do_not_change_grade():
    result = compliance_grade(3.0)
    assert result.aa.large is True
    assert result.grade is ComplianceGrade.FAIL
    assert check_wcag_compliance(2.99).aa.large is False


def test_grade_for_ratio():
    assert grade_for_ratio(21) is ComplianceGrade.AAA
    assert grade_for_ratio(6.99) is ComplianceGrade.AA
    assert grade_for_ratio(1) is ComplianceGrade.FAIL


def test_format_ratio():
    assert format_ratio(4.5) == "4.50:1"
    assert format_ratio(21, 1) == "21.0:1"


def test_analyze_contrast_normalizes_colors():
    report = analyze_contrast("000000", "#FFFFFF", label="Body")
    assert report.foreground == "#000000"
    assert report.background == "#ffffff"
    assert report.label == "Body"
    assert report.compliance.grade is ComplianceGrade.AAA


def test_similarity_identity():
    assert similarity_score("#3b82f6", "#3b82f6") == pytest.approx(100.0)


def test_similarity_hue_wraps_around():
    # 350° vs 10°, misma saturación/luminosidad: distancia de hue 20°.
    expected = (100 - 20 / 180 * 100) * 0.5 + 100 * 0.3 + 100 * 0.2
    assert similarity_score("#FF002B", "#FF2B00") == pytest.approx(expected)
    assert similarity_score("#FF002B", "#FF2B00") == pytest.approx(94.444, abs=1e-3)


def test_similarity_opposite_hue_and_lightness():
    assert similarity_score("#ff0000", "#00ffff") == pytest.approx(50.0)
    assert similarity_score("#000000", "#ffffff") == pytest.approx(80.0)


def test_similarity_is_symmetric():
    assert similarity_score("#3b82f6", "#f59e0b") == similarity_score("#f59e0b", "#3b82f6")


def test_similarity_rejects_malformed():
    with pytest.raises(InvalidFormatError):
        similarity_score("#ff0000", "red")


def _catalog():
    return [
        NamedColor(name="cyan", color="#00ffff", identifier="c"),
        NamedColor(name="red", color="#ff0000", identifier="r"),
        NamedColor(name="orange-red", color="#FF2B00"),
        NamedColor(name="gray", color="#808080"),
    ]


def test_rank_by_similarity_orders_descending():
    matches = rank_by_similarity("#ff0000", _catalog())
    assert [m.name for m in matches] == ["red", "orange-red", "gray", "cyan"]
    assert matches[0].identifier == "r"
    assert matches[1].color == "#ff2b00"


def test_rank_by_similarity_threshold_is_exclusive():
    matches = rank_by_similarity("#ff0000", _catalog(), threshold=70)
    # gray puntúa exactamente 70 -> excluido.
    assert [m.name for m in matches] == ["red", "orange-red"]


def test_rank_by_similarity_limit():
    matches = rank_by_similarity("#ff0000", _catalog(), threshold=60, limit=1)
    assert [m.name for m in matches] == ["red"]


def test_rank_by_similarity_accepts_duck_typed_swatches():
    @dataclass
    class Token:
        name: str
        color: str

    matches = rank_by_similarity("#000000", [Token("ink", "#000000"), Token("paper", "#ffffff")])
    assert [m.name for m in matches] == ["ink", "paper"]
    assert matches[0].identifier is None

import pytest

from bloodwork_api.schemas.screening import ExtractedValue
from bloodwork_api.services.classifier import UNKNOWN_EXPLANATION, analyze_measurement, analyze_value
from bloodwork_api.services.units import IncomparableUnitsError, convert_unit, normalize_unit


@pytest.mark.parametrize(
    ("value", "status"),
    [
        (85, "normal"),
        (70, "normal"),
        (100, "normal"),
        (69.9, "low"),
        (49, "low"),
        (48.9, "critical"),
        (100.1, "high"),
        (150, "high"),
        (150.1, "critical"),
    ],
)
def test_glucose_thresholds(value, status):
    result = analyze_value("Glucose (Fasting)", value, "mg/dL", key="glucose")

    assert result.status == status
    assert result.normal_range == "70-100 mg/dL"
    assert result.units_comparable is True


def test_lookup_by_display_name_without_key():
    assert analyze_value("Glucose (Fasting)", 250, "mg/dL").status == "critical"


def test_glucose_in_mmol_is_converted_before_comparison():
    result = analyze_value("Glucose (Fasting)", 5, "mmol/L", key="glucose")

    assert result.status == "normal"
    assert "within the normal range (70-100 mg/dL)" in result.explanation


@pytest.mark.parametrize("value", [-5, 0, 42, 10_000])
def test_unknown_test_is_never_flagged(value):
    result = analyze_value("Sodium", value, "mmol/L")

    assert result.status == "normal"
    assert result.normal_range == "Unknown"
    assert result.explanation == UNKNOWN_EXPLANATION


def test_incomparable_units_are_not_compared_raw():
    # 5000 would be critical-high if compared against mg/dL without conversion.
    result = analyze_value("Glucose (Fasting)", 5000, "U/L", key="glucose")

    assert result.status == "normal"
    assert result.units_comparable is False
    assert result.normal_range == "70-100 mg/dL"
    assert "cannot be compared" in result.explanation


def test_explanations_follow_the_status_category():
    low = analyze_value("Hemoglobin", 10, "g/dL", key="hemoglobin")
    high = analyze_value("Hemoglobin", 19, "g/dL", key="hemoglobin")
    critical_low = analyze_value("Hemoglobin", 5, "g/dL", key="hemoglobin")

    assert low.status == "low"
    assert low.explanation.startswith("Your Hemoglobin level is below the normal range (12-17.5 g/dL).")
    assert high.status == "high"
    assert high.explanation.startswith("Your Hemoglobin level is above the normal range (12-17.5 g/dL).")
    assert critical_low.status == "critical"
    assert "below the normal range" in critical_low.explanation


def test_analyze_measurement_carries_reading_fields():
    reading = ExtractedValue(key="tsh", name="TSH (Thyroid Stimulating Hormone)", value=2.1, unit="uIU/mL")

    analyzed = analyze_measurement(reading)

    assert analyzed.name == reading.name
    assert analyzed.value == 2.1
    assert analyzed.unit == "uIU/mL"
    assert analyzed.status == "normal"
    assert analyzed.normal_range == "0.4-4 mIU/L"


def test_normalize_unit():
    assert normalize_unit(" K/µL ") == "k/ul"
    assert normalize_unit("K/μL") == "k/ul"
    assert normalize_unit("mcg/dL") == "ug/dl"
    assert normalize_unit("MG/DL") == "mg/dl"


def test_convert_unit_uses_reverse_factor():
    assert convert_unit(90, "mg/dL", "mmol/L", analyte="glucose") == pytest.approx(5)
    assert convert_unit(5, "mmol/L", "mg/dL", analyte="glucose") == pytest.approx(90)


def test_conversion_is_scoped_to_its_analyte():
    with pytest.raises(IncomparableUnitsError):
        convert_unit(5, "mmol/L", "U/L", analyte="alt")
    assert convert_unit(120, "ug/L", "ng/mL", analyte="ferritin") == 120

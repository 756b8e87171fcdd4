from bloodwork_api.schemas.screening import AnalyzedValue, ExtractedValue, ValueAnalysis
from bloodwork_api.services.reference_ranges import ReferenceRange, find_range_by_name, get_range
from bloodwork_api.services.units import IncomparableUnitsError, convert_unit

CRITICAL_LOW_FACTOR = 0.7
CRITICAL_HIGH_FACTOR = 1.5

UNKNOWN_EXPLANATION = (
    "This test result was found in your bloodwork. We recommend consulting with your doctor about this value."
)


def _resolve_range(name: str, key: str | None) -> ReferenceRange | None:
    if key is not None:
        return get_range(key)
    return find_range_by_name(name)


def classify(value: float, reference: ReferenceRange) -> str:
    if value < reference.min:
        return "critical" if value < reference.min * CRITICAL_LOW_FACTOR else "low"
    if value > reference.max:
        return "critical" if value > reference.max * CRITICAL_HIGH_FACTOR else "high"
    return "normal"


def _explain(name: str, value: float, reference: ReferenceRange) -> str:
    bounds = f"({reference.label})"
    if value < reference.min:
        return (
            f"Your {name} level is below the normal range {bounds}. "
            "This could indicate a deficiency or underlying condition."
        )
    if value > reference.max:
        return f"Your {name} level is above the normal range {bounds}. This may require medical attention."
    return f"Your {name} level is within the normal range {bounds}. This is a good sign!"


def analyze_value(name: str, value: float, unit: str, key: str | None = None) -> ValueAnalysis:
    reference = _resolve_range(name, key)
    if reference is None:
        return ValueAnalysis(status="normal", normal_range="Unknown", explanation=UNKNOWN_EXPLANATION)

    try:
        normalized = convert_unit(value, unit, reference.unit, analyte=reference.key)
    except IncomparableUnitsError:
        return ValueAnalysis(
            status="normal",
            normal_range=reference.label,
            explanation=(
                f"Your {name} result was reported in {unit}, which cannot be compared with the "
                f"normal range ({reference.label}). Please review this value with your doctor."
            ),
            units_comparable=False,
        )

    return ValueAnalysis(
        status=classify(normalized, reference),
        normal_range=reference.label,
        explanation=_explain(name, normalized, reference),
    )


def analyze_measurement(measurement: ExtractedValue) -> AnalyzedValue:
    analysis = analyze_value(measurement.name, measurement.value, measurement.unit, key=measurement.key)
    return AnalyzedValue(**measurement.model_dump(), **analysis.model_dump())

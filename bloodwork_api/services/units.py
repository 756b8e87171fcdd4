"""Unit normalization and conversion between report units and reference units.

Conversions are explicit: a unit pair is either listed here (for one analyte
or for every analyte) or it is incomparable. Reverse directions are derived
from the listed factor.
"""

_UNIT_ALIASES = {
    "mcg/dl": "ug/dl",
    "mcg/l": "ug/l",
    "iu/l": "u/l",
    "uiu/ml": "miu/l",
    "thou/ul": "k/ul",
    "x10^3/ul": "k/ul",
    "mil/ul": "m/ul",
    "x10^6/ul": "m/ul",
}

# (analyte key or None for any analyte, from unit, to unit) -> multiplier
CONVERSIONS: dict[tuple[str | None, str, str], float] = {
    ("glucose", "mmol/l", "mg/dl"): 18.0,
    ("cholesterol", "mmol/l", "mg/dl"): 38.67,
    ("ldl", "mmol/l", "mg/dl"): 38.67,
    ("hdl", "mmol/l", "mg/dl"): 38.67,
    ("triglycerides", "mmol/l", "mg/dl"): 88.57,
    ("creatinine", "umol/l", "mg/dl"): 1 / 88.4,
    ("bun", "mmol/l", "mg/dl"): 2.8,
    ("hemoglobin", "g/l", "g/dl"): 0.1,
    ("hemoglobin", "mmol/l", "g/dl"): 1.611,
    ("vitamin_d", "nmol/l", "ng/ml"): 1 / 2.496,
    ("b12", "pmol/l", "pg/ml"): 1.355,
    ("iron", "umol/l", "ug/dl"): 5.585,
    ("t4", "nmol/l", "ug/dl"): 1 / 12.87,
    (None, "ug/l", "ng/ml"): 1.0,
}


class IncomparableUnitsError(ValueError):
    def __init__(self, unit: str, target_unit: str):
        super().__init__(f"Cannot compare a value in {unit!r} with a range in {target_unit!r}")
        self.unit = unit
        self.target_unit = target_unit


def normalize_unit(unit: str) -> str:
    cleaned = (unit or "").strip().lower().replace(" ", "")
    cleaned = cleaned.replace("μ", "u").replace("µ", "u")
    return _UNIT_ALIASES.get(cleaned, cleaned)


def _factor(analyte: str | None, source: str, target: str) -> float | None:
    for scope in (analyte, None):
        if (scope, source, target) in CONVERSIONS:
            return CONVERSIONS[(scope, source, target)]
        if (scope, target, source) in CONVERSIONS:
            return 1 / CONVERSIONS[(scope, target, source)]
    return None


def convert_unit(value: float, unit: str, target_unit: str, analyte: str | None = None) -> float:
    source = normalize_unit(unit)
    target = normalize_unit(target_unit)
    if source == target:
        return value
    factor = _factor(analyte, source, target)
    if factor is None:
        raise IncomparableUnitsError(unit, target_unit)
    return value * factor

"""Adult reference ranges for the bloodwork tests the parser recognizes."""
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ReferenceRange:
    key: str
    name: str
    min: float
    max: float
    unit: str

    @property
    def label(self) -> str:
        return f"{self.min:g}-{self.max:g} {self.unit}"


_RANGES = [
    ReferenceRange("glucose", "Glucose (Fasting)", 70, 100, "mg/dL"),
    ReferenceRange("hemoglobin", "Hemoglobin", 12, 17.5, "g/dL"),
    ReferenceRange("hematocrit", "Hematocrit", 36, 52, "%"),
    ReferenceRange("wbc", "White Blood Cell Count", 4.5, 11, "K/μL"),
    ReferenceRange("rbc", "Red Blood Cell Count", 4.5, 5.9, "M/μL"),
    ReferenceRange("platelets", "Platelet Count", 150, 450, "K/μL"),
    ReferenceRange("cholesterol", "Total Cholesterol", 0, 200, "mg/dL"),
    ReferenceRange("ldl", "LDL Cholesterol", 0, 100, "mg/dL"),
    ReferenceRange("hdl", "HDL Cholesterol", 40, 999, "mg/dL"),
    ReferenceRange("triglycerides", "Triglycerides", 0, 150, "mg/dL"),
    ReferenceRange("creatinine", "Creatinine", 0.6, 1.2, "mg/dL"),
    ReferenceRange("bun", "BUN (Blood Urea Nitrogen)", 7, 20, "mg/dL"),
    ReferenceRange("alt", "ALT (Alanine Aminotransferase)", 7, 56, "U/L"),
    ReferenceRange("ast", "AST (Aspartate Aminotransferase)", 10, 40, "U/L"),
    ReferenceRange("tsh", "TSH (Thyroid Stimulating Hormone)", 0.4, 4.0, "mIU/L"),
    ReferenceRange("t4", "T4 (Thyroxine)", 4.5, 11.2, "μg/dL"),
    ReferenceRange("vitamin_d", "Vitamin D", 20, 50, "ng/mL"),
    ReferenceRange("b12", "Vitamin B12", 200, 900, "pg/mL"),
    ReferenceRange("iron", "Iron", 60, 170, "μg/dL"),
    ReferenceRange("ferritin", "Ferritin", 15, 200, "ng/mL"),
]

REFERENCE_RANGES: MappingProxyType = MappingProxyType({item.key: item for item in _RANGES})


def get_range(key: str | None) -> ReferenceRange | None:
    if key is None:
        return None
    return REFERENCE_RANGES.get(key)


def find_range_by_name(name: str) -> ReferenceRange | None:
    for item in REFERENCE_RANGES.values():
        if item.name == name:
            return item
    return None


__all__ = ["REFERENCE_RANGES", "ReferenceRange", "find_range_by_name", "get_range"]

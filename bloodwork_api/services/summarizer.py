from collections.abc import Sequence

from bloodwork_api.schemas.screening import AnalyzedValue

CLOSING_SENTENCE = "Review the detailed results below for more information about each test."


def generate_summary(values: Sequence[AnalyzedValue]) -> tuple[str, list[str]]:
    critical = sum(1 for v in values if v.status == "critical")
    high = sum(1 for v in values if v.status == "high")
    low = sum(1 for v in values if v.status == "low")

    if critical:
        summary = f"⚠️ Your bloodwork shows {critical} critical value(s) that require immediate medical attention. "
        recommendations = [
            "Schedule an appointment with your doctor as soon as possible.",
            "If you're experiencing severe symptoms, consider seeking emergency care.",
        ]
    elif high or low:
        summary = f"Your bloodwork shows {high + low} value(s) outside the normal range. "
        if high:
            summary += f"You have {high} elevated value(s). "
        if low:
            summary += f"You have {low} low value(s). "
        recommendations = [
            "Consult with your healthcare provider about these results.",
            "Consider lifestyle changes like diet and exercise if recommended by your doctor.",
        ]
    else:
        summary = "✅ Great news! All your bloodwork values are within normal ranges. "
        recommendations = [
            "Continue maintaining a healthy lifestyle.",
            "Schedule regular check-ups to monitor your health.",
        ]

    return summary + CLOSING_SENTENCE, recommendations

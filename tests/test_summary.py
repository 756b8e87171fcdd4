from bloodwork_api.schemas.screening import AnalyzedValue
from bloodwork_api.services.summarizer import CLOSING_SENTENCE, generate_summary


def _value(status: str, name: str = "Hemoglobin") -> AnalyzedValue:
    return AnalyzedValue(
        key=None,
        name=name,
        value=1.0,
        unit="g/dL",
        status=status,
        normal_range="12-17.5 g/dL",
        explanation="",
    )


def test_critical_branch_wins_over_high_and_low():
    values = [_value("critical"), _value("high"), _value("high"), _value("low")]

    summary, recommendations = generate_summary(values)

    assert summary.startswith("⚠")
    assert "Your bloodwork shows 1 critical value(s) that require immediate medical attention." in summary
    assert recommendations == [
        "Schedule an appointment with your doctor as soon as possible.",
        "If you're experiencing severe symptoms, consider seeking emergency care.",
    ]


def test_out_of_range_branch_counts_high_and_low_separately():
    values = [_value("high"), _value("high"), _value("low"), _value("normal")]

    summary, recommendations = generate_summary(values)

    assert summary.startswith("Your bloodwork shows 3 value(s) outside the normal range. ")
    assert "You have 2 elevated value(s). " in summary
    assert "You have 1 low value(s). " in summary
    assert recommendations[0] == "Consult with your healthcare provider about these results."


def test_only_low_values_omit_the_elevated_sentence():
    summary, _ = generate_summary([_value("low")])

    assert "elevated" not in summary
    assert "You have 1 low value(s). " in summary


def test_all_normal_branch():
    summary, recommendations = generate_summary([_value("normal"), _value("normal")])

    assert "Great news! All your bloodwork values are within normal ranges." in summary
    assert recommendations == [
        "Continue maintaining a healthy lifestyle.",
        "Schedule regular check-ups to monitor your health.",
    ]


def test_closing_sentence_is_always_appended():
    for status in ("critical", "high", "low", "normal"):
        summary, _ = generate_summary([_value(status)])
        assert summary.endswith(CLOSING_SENTENCE)

from bloodwork_api.models.screening import BloodworkScreening

__all__ = [
    "BloodworkScreening",
]

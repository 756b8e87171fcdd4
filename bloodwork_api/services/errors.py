"""Error kinds raised by the bloodwork screening pipeline.

Each error carries the HTTP status it maps to, so the API layer can render
it without knowing which stage failed.
"""


class ScreeningError(Exception):
    status_code = 500

    def __init__(self, message: str, suggestion: str | None = None, preview: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.preview = preview


class MissingInputError(ScreeningError):
    status_code = 400


class UnsupportedFormatError(ScreeningError):
    status_code = 400

    def __init__(self):
        super().__init__(
            "Image files are not yet supported. Please upload a PDF file of your bloodwork results.",
            suggestion=(
                "Most labs provide results in PDF format. "
                "If you only have an image, consider converting it to PDF first."
            ),
        )


class ExtractionError(ScreeningError):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(
            f"Failed to extract text from file. Please ensure it's a valid PDF or text file. ({detail})"
        )
        self.detail = detail


class NoValuesFoundError(ScreeningError):
    status_code = 400
    preview_length = 500

    def __init__(self, text: str):
        super().__init__(
            "Could not extract bloodwork values from the file.",
            suggestion="Please ensure your file contains readable bloodwork results with test names and values.",
            preview=text[: self.preview_length],
        )


class PersistenceError(ScreeningError):
    status_code = 500


class RateLimitExceededError(ScreeningError):
    status_code = 429

    def __init__(self):
        super().__init__("Too many requests")

class SubmissionError(Exception):
    """Base class for failures in the submission workflow."""


class ExtractionError(SubmissionError):
    """No text could be obtained from the uploaded file."""

    def __init__(self, filename: str, reason: str = "no extractable text"):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not extract text from {filename}: {reason}")


class FileTooLargeError(SubmissionError):
    def __init__(self, filename: str, size_bytes: int, limit_mb: int):
        self.filename = filename
        self.size_bytes = size_bytes
        self.limit_mb = limit_mb
        super().__init__(f"{filename} is {size_bytes / (1024 * 1024):.2f} MB, limit is {limit_mb} MB")

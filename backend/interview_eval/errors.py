# backend/interview_eval/errors.py
from typing import Any, Dict

# callable error code -> HTTP status
HTTP_STATUS = {
    "invalid-argument": 400,
    "unauthenticated": 401,
    "not-found": 404,
    "internal": 500,
}


class EvaluationError(Exception):
    """Batch-fatal failure surfaced to the caller with a categorized code."""

    def __init__(self, code: str, message: str):
        if code not in HTTP_STATUS:
            raise ValueError(f"unknown error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS[self.code]

    @property
    def status(self) -> str:
        # "not-found" -> "NOT_FOUND"
        return self.code.upper().replace("-", "_")

    def to_dict(self) -> Dict[str, Any]:
        return {"error": {"status": self.status, "message": self.message}}

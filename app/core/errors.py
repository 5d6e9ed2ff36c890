from typing import Optional


class InvalidInputError(ValueError):
    """Raised when the scoring engine is handed malformed input.

    `code` is a stable snake_case identifier (``invalid_date``,
    ``invalid_duration`` ...) suitable for API error payloads; `field` names
    the offending input when known.
    """

    def __init__(self, code: str, field: Optional[str] = None, detail: Optional[str] = None):
        self.code = code
        self.field = field
        self.detail = detail
        msg = code if field is None else f"{code} ({field})"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)

    def as_dict(self) -> dict:
        return {"detail": self.code, "field": self.field}

from fastapi import HTTPException

class WanderError(HTTPException):
    """Base for errors rendered to the client as {"error": detail}."""

class MissingCredentialError(WanderError):
    def __init__(self, detail: str = "Missing GOOGLE_KEY in .env"):
        super().__init__(status_code=500, detail=detail)

class InvalidCoordinateError(WanderError):
    def __init__(self, detail: str = "lat and lng are required query parameters"):
        super().__init__(status_code=400, detail=detail)

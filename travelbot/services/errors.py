from typing import Any, Optional


class TravelBotError(Exception):
    """Base class for failures that abort a chat request."""

    code = "internal_error"

    def __init__(self, message: str, payload: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload


class AuthError(TravelBotError):
    """The Amadeus client-credentials exchange failed."""

    code = "auth_error"


class FlightLookupError(TravelBotError):
    """The flight-offer search failed after a successful authentication."""

    code = "flight_lookup_error"


class CompletionError(TravelBotError):
    """The language model did not return a usable completion."""

    code = "completion_error"

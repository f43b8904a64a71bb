import json
import os

# Settings are read when travelbot is first imported
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("AMADEUS_API_KEY", "test-amadeus-id")
os.environ.setdefault("AMADEUS_API_SECRET", "test-amadeus-secret")
os.environ.setdefault("PIXABAY_API_KEY", "test-pixabay-key")
os.environ["AMADEUS_TOKEN_CACHE"] = "false"

import pytest
import requests
from langchain_core.messages import AIMessage


def build_response(status_code: int, body=None, text: str = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://upstream.test"
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeLLM:
    """Stands in for ChatOpenAI; records the messages it receives."""

    def __init__(self, content="Hola, soy TravelBot.", error: Exception = None):
        self.content = content
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.content)


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def token_body():
    return {
        "type": "amadeusOAuth2Token",
        "access_token": "abc123",
        "token_type": "Bearer",
        "expires_in": 1799,
        "state": "approved",
    }


@pytest.fixture
def amadeus_offer():
    return {
        "type": "flight-offer",
        "id": "1",
        "itineraries": [
            {
                "duration": "PT14H05M",
                "segments": [
                    {
                        "departure": {"iataCode": "SAL", "at": "2025-01-02T07:10:00"},
                        "arrival": {"iataCode": "MIA", "terminal": "N", "at": "2025-01-02T11:05:00"},
                        "carrierCode": "AA",
                    },
                    {
                        "departure": {"iataCode": "MIA", "terminal": "N", "at": "2025-01-02T16:40:00"},
                        "arrival": {"iataCode": "MAD", "terminal": "4S", "at": "2025-01-03T07:15:00"},
                        "carrierCode": "IB",
                    },
                ],
            }
        ],
        "price": {"currency": "EUR", "total": "812.45", "grandTotal": "812.45"},
        "validatingAirlineCodes": ["AA", "IB"],
    }


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def make_llm():
    return FakeLLM

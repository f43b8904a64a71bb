from typing import List

import requests

from ..api.ChatSchemas import FlightOffer
from ..settings.config import settings
from ..settings.logging import app_logger as logger
from ..utils.jsonify import transform_amadeus_offers
from .amadeusAuth import TokenProvider, token_provider
from .errors import FlightLookupError


class FlightSearchService:
    """One-way, single-adult offer search on the Amadeus flight-offers endpoint."""

    def __init__(self, tokens: TokenProvider, base_url: str, timeout: float = 15):
        self.tokens = tokens
        self.search_url = f"{base_url.rstrip('/')}/v2/shopping/flight-offers"
        self.timeout = timeout

    def search(self, origin: str, destination: str, date: str) -> List[FlightOffer]:
        # AuthError propagates as-is, the search is never attempted without a token
        credential = self.tokens.acquire()

        logger.info("Searching flights from %s to %s on %s", origin, destination, date)
        try:
            response = requests.get(
                self.search_url,
                headers={"Authorization": f"Bearer {credential.access_token}"},
                params={
                    "originLocationCode": origin,
                    "destinationLocationCode": destination,
                    "departureDate": date,
                    "adults": 1,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            offers = transform_amadeus_offers(response.json())
        except requests.HTTPError as e:
            detail = _error_detail(e.response)
            logger.error("Amadeus flight search rejected: %s", detail)
            raise FlightLookupError("No se pudo obtener información de vuelos.", payload=detail) from e
        except requests.RequestException as e:
            logger.error("Amadeus flight search request failed: %s", e)
            raise FlightLookupError("No se pudo obtener información de vuelos.", payload=str(e)) from e
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected Amadeus flight payload: %s", e)
            raise FlightLookupError("No se pudo obtener información de vuelos.", payload=str(e)) from e

        logger.info("Found %d flight offers for %s -> %s", len(offers), origin, destination)
        return offers


def _error_detail(response):
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


flight_service = FlightSearchService(
    tokens=token_provider,
    base_url=settings.AMADEUS_BASE_URL,
    timeout=settings.HTTP_TIMEOUT,
)

from typing import Any, Dict, List

from ..api.ChatSchemas import FlightEndpoint, FlightOffer


def transform_amadeus_endpoint(point: Dict[str, Any]) -> FlightEndpoint:
    return FlightEndpoint(
        location=point["iataCode"],
        time=point["at"],
    )


def transform_amadeus_offer(offer: Dict[str, Any]) -> FlightOffer:
    # Only the first itinerary's first segment is surfaced to the frontend
    segment = offer["itineraries"][0]["segments"][0]
    return FlightOffer(
        airline=offer["validatingAirlineCodes"][0],
        price=str(offer["price"]["total"]),
        departure=transform_amadeus_endpoint(segment["departure"]),
        arrival=transform_amadeus_endpoint(segment["arrival"]),
    )


def transform_amadeus_offers(payload: Dict[str, Any]) -> List[FlightOffer]:
    """Map a /v2/shopping/flight-offers body to FlightOffers, keeping provider order."""
    return [transform_amadeus_offer(offer) for offer in payload["data"]]

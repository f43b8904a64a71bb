import re
from concurrent.futures import ThreadPoolExecutor

from ..api.ChatSchemas import ChatResponse, FlightQuery, FreeformQuery, Intent, PlaceQuery
from ..prompts.ChatTemplates import ChatPrompts, ChatReplies
from ..settings.logging import app_logger as logger
from .flightSearch import FlightSearchService, flight_service
from .llm import ConversationAgent, conversation_agent
from .pixabaySearch import ImageSearchService, image_service

FLIGHT_PATTERN = re.compile(r"origen:\s*(\w+),\s*destino:\s*(\w+),\s*fecha:\s*([\d-]+)", re.IGNORECASE)
PLACE_PATTERN = re.compile(r"h[aá]blame de\s*(\w+)", re.IGNORECASE)


def classify_message(message: str) -> Intent:
    """
    Pure intent classification. The flight shorthand always wins over the
    place shorthand; anything else is a freeform question.
    """
    flight_match = FLIGHT_PATTERN.search(message)
    if flight_match:
        origin, destination, date = flight_match.groups()
        return FlightQuery(origin=origin, destination=destination, date=date)

    place_match = PLACE_PATTERN.search(message)
    if place_match:
        return PlaceQuery(place=place_match.group(1))

    return FreeformQuery(message=message)


class MessageRouter:

    def __init__(self, flights: FlightSearchService, images: ImageSearchService, agent: ConversationAgent):
        self.flights = flights
        self.images = images
        self.agent = agent

    def route(self, message: str) -> ChatResponse:
        intent = classify_message(message)
        logger.info("Classified message as %s", type(intent).__name__)

        if isinstance(intent, FlightQuery):
            return self.answer_flights(intent)
        if isinstance(intent, PlaceQuery):
            return self.answer_place(intent, message)
        return self.answer_freeform(intent)

    def answer_flights(self, query: FlightQuery) -> ChatResponse:
        offers = self.flights.search(query.origin, query.destination, query.date)
        if not offers:
            return ChatResponse(reply=ChatReplies.no_flights)
        return ChatResponse(reply=ChatReplies.flights_found, flights=offers)

    def answer_place(self, query: PlaceQuery, message: str) -> ChatResponse:
        logger.info("Place request for %s", query.place)
        # Image search never raises, so only the completion can abort the request
        with ThreadPoolExecutor(max_workers=2) as pool:
            images_future = pool.submit(self.images.search, query.place)
            reply = self.agent.complete(ChatPrompts.place_persona, message)
            images = images_future.result()
        return ChatResponse(reply=reply, images=images)

    def answer_freeform(self, query: FreeformQuery) -> ChatResponse:
        reply = self.agent.complete(ChatPrompts.general_persona, query.message)
        return ChatResponse(reply=reply)


message_router = MessageRouter(flights=flight_service, images=image_service, agent=conversation_agent)

import pytest

from travelbot.api.ChatSchemas import FlightEndpoint, FlightOffer, FlightQuery, FreeformQuery, PlaceQuery
from travelbot.prompts.ChatTemplates import ChatPrompts, ChatReplies
from travelbot.services.errors import AuthError, CompletionError
from travelbot.services.messageRouter import MessageRouter, classify_message


class StubFlights:
    def __init__(self, offers=None, error=None):
        self.offers = offers or []
        self.error = error
        self.calls = []

    def search(self, origin, destination, date):
        self.calls.append((origin, destination, date))
        if self.error is not None:
            raise self.error
        return self.offers


class StubImages:
    def __init__(self, images=None):
        self.images = images or []
        self.calls = []

    def search(self, term):
        self.calls.append(term)
        return self.images


class StubAgent:
    def __init__(self, reply="respuesta", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, system_prompt, user_message):
        self.calls.append((system_prompt, user_message))
        if self.error is not None:
            raise self.error
        return self.reply


def sample_offer():
    return FlightOffer(
        airline="IB",
        price="812.45",
        departure=FlightEndpoint(location="SAL", time="2025-01-02T07:10:00"),
        arrival=FlightEndpoint(location="MAD", time="2025-01-02T20:00:00"),
    )


def test_classify_flight_shorthand():
    intent = classify_message("origen: SAL, destino: MAD, fecha: 2025-01-02")
    assert intent == FlightQuery(origin="SAL", destination="MAD", date="2025-01-02")


def test_classify_flight_is_case_insensitive_and_keeps_captured_text():
    intent = classify_message("Quiero volar ORIGEN:sal,  Destino: mad, FECHA: 2025-1-2 por favor")
    assert intent == FlightQuery(origin="sal", destination="mad", date="2025-1-2")


def test_flight_shorthand_takes_priority_over_place():
    intent = classify_message("hablame de Francia, origen: SAL, destino: CDG, fecha: 2025-03-04")
    assert isinstance(intent, FlightQuery)
    assert intent.destination == "CDG"


@pytest.mark.parametrize("message, place", [
    ("hablame de Francia", "Francia"),
    ("Háblame de Japón", "Japón"),
    ("por favor HABLAME DE italia y su comida", "italia"),
])
def test_classify_place_shorthand(message, place):
    assert classify_message(message) == PlaceQuery(place=place)


@pytest.mark.parametrize("message", [
    "hola",
    "origen: SAL, destino: MAD",
    "cuentame de Francia",
    "",
])
def test_classify_freeform(message):
    assert classify_message(message) == FreeformQuery(message=message)


def test_flight_branch_with_offers():
    flights, images, agent = StubFlights(offers=[sample_offer()]), StubImages(), StubAgent()
    router = MessageRouter(flights=flights, images=images, agent=agent)

    response = router.route("origen: SAL, destino: MAD, fecha: 2025-01-02")

    assert flights.calls == [("SAL", "MAD", "2025-01-02")]
    assert images.calls == []
    assert agent.calls == []
    assert response.reply == ChatReplies.flights_found
    assert response.flights == [sample_offer()]
    assert response.images is None


def test_flight_branch_without_offers_is_not_an_error():
    router = MessageRouter(flights=StubFlights(offers=[]), images=StubImages(), agent=StubAgent())

    response = router.route("origen: SAL, destino: MAD, fecha: 2025-01-02")

    assert response.reply == "No se encontraron vuelos disponibles para esa ruta y fecha."
    assert response.flights is None


def test_flight_branch_propagates_auth_error():
    agent = StubAgent()
    router = MessageRouter(flights=StubFlights(error=AuthError("boom")), images=StubImages(), agent=agent)

    with pytest.raises(AuthError):
        router.route("origen: SAL, destino: MAD, fecha: 2025-01-02")
    assert agent.calls == []


def test_place_branch_merges_images_and_reply():
    flights = StubFlights()
    images = StubImages(images=["https://img/1.jpg", "https://img/2.jpg"])
    agent = StubAgent(reply="Francia es preciosa. origen: SAL, destino: CDG, fecha: aaaa-mm-dd")
    router = MessageRouter(flights=flights, images=images, agent=agent)

    response = router.route("hablame de Francia")

    assert flights.calls == []
    assert images.calls == ["Francia"]
    assert agent.calls == [(ChatPrompts.place_persona, "hablame de Francia")]
    assert response.reply.startswith("Francia es preciosa")
    assert response.images == ["https://img/1.jpg", "https://img/2.jpg"]
    assert response.flights is None


def test_place_branch_with_no_images_still_answers():
    router = MessageRouter(flights=StubFlights(), images=StubImages(images=[]), agent=StubAgent(reply="ok"))

    response = router.route("hablame de Narnia")

    assert response.reply == "ok"
    assert response.images == []


def test_place_branch_completion_error_is_fatal():
    router = MessageRouter(
        flights=StubFlights(), images=StubImages(images=["https://img/1.jpg"]),
        agent=StubAgent(error=CompletionError("quota")),
    )

    with pytest.raises(CompletionError):
        router.route("hablame de Francia")


def test_freeform_branch_only_calls_agent():
    flights, images, agent = StubFlights(), StubImages(), StubAgent(reply="¡Hola!")
    router = MessageRouter(flights=flights, images=images, agent=agent)

    response = router.route("hola")

    assert flights.calls == []
    assert images.calls == []
    assert agent.calls == [(ChatPrompts.general_persona, "hola")]
    assert response.reply == "¡Hola!"
    assert response.flights is None and response.images is None

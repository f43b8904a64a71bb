from pydantic import BaseModel
from typing import List, Literal, Optional, Union


class ChatRequest(BaseModel):
    """Input schema for the chat endpoint"""
    message: str

class FlightEndpoint(BaseModel):
    """Departure or arrival point of a flight segment"""
    location: str
    time: str

class FlightOffer(BaseModel):
    """Schema for a single priced flight option"""
    airline: str
    price: str
    departure: FlightEndpoint
    arrival: FlightEndpoint

class ChatResponse(BaseModel):
    """Response schema for the API; unset lists are dropped from the body"""
    reply: str
    flights: Optional[List[FlightOffer]] = None
    images: Optional[List[str]] = None

class ErrorResponse(BaseModel):
    error: str
    code: str

class ChatTurn(BaseModel):
    role: Literal["system", "user"]
    content: str

# Intents produced by the message classifier

class FlightQuery(BaseModel):
    origin: str
    destination: str
    date: str

class PlaceQuery(BaseModel):
    place: str

class FreeformQuery(BaseModel):
    message: str

Intent = Union[FlightQuery, PlaceQuery, FreeformQuery]

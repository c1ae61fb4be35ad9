"""Mock travel tools exposed to the model.

These return canned answers; a real deployment would call a flight or hotel
inventory API here instead.
"""
import logging
from types import MappingProxyType

from langchain_core.tools import StructuredTool

from travel_agent.models.schemas import SearchFlightsInput, SuggestHotelInput


log = logging.getLogger("tools")

FLIGHT_PRICE = "$550"

HOTELS = MappingProxyType({
    "london": "The Savoy is a highly-rated luxury hotel with excellent reviews.",
    "tokyo": "The Park Hyatt is a great choice with stunning city views.",
})


def search_flights(departure: str, arrival: str) -> str:
    log.info(f"Tool called: searchFlights from {departure} to {arrival}")
    return (
        f"Found flights from {departure} to {arrival}. "
        f"A non-stop flight is available for {FLIGHT_PRICE}."
    )


def suggest_hotel(destination: str) -> str:
    log.info(f"Tool called: suggestHotel in {destination}")
    hotel = HOTELS.get(destination.lower())
    if hotel is None:
        return f"I'm sorry, I don't have a specific hotel recommendation for {destination}."
    return hotel


search_flights_tool = StructuredTool.from_function(
    func=search_flights,
    name="searchFlights",
    description="Searches for flights between a departure and arrival city.",
    args_schema=SearchFlightsInput,
)

suggest_hotel_tool = StructuredTool.from_function(
    func=suggest_hotel,
    name="suggestHotel",
    description="Suggests a popular and well-rated hotel in a given destination.",
    args_schema=SuggestHotelInput,
)

# Catalog handed to the model; it picks tools by name
TOOL_REGISTRY = MappingProxyType({
    tool.name: tool for tool in (search_flights_tool, suggest_hotel_tool)
})

from pydantic import BaseModel, Field


class TravelQuery(BaseModel):
    user_query: str = Field(alias="userQuery", description="Natural language travel request")


class TravelResult(BaseModel):
    result: str


class SearchFlightsInput(BaseModel):
    departure: str = Field(description="Departure city")
    arrival: str = Field(description="Arrival city")


class SuggestHotelInput(BaseModel):
    destination: str = Field(description="Destination city")

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError

from travel_agent.models.errors import ValidationError, describe_validation_errors
from travel_agent.models.schemas import TravelQuery, TravelResult
from travel_agent.services.travel_service import TravelAgentService, travel_service


router = APIRouter()


def get_travel_service() -> TravelAgentService:
    return travel_service


async def parse_travel_query(request: Request) -> TravelQuery:
    """Decode the body as JSON whatever Content-Type the client sent."""
    body = await request.body()
    try:
        return TravelQuery.model_validate_json(body)
    except PydanticValidationError as e:
        raise ValidationError(describe_validation_errors(e.errors())) from e


@router.post("/travelAgent", response_model=TravelResult)
def travel_agent(
    req: TravelQuery = Depends(parse_travel_query),
    service: TravelAgentService = Depends(get_travel_service),
):
    return TravelResult(result=service.run(req))

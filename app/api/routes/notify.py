"""
Countdown trigger endpoints. One GET per occasion; the scheduler calls
these over loopback, operators may call them by hand.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.config import Settings
from app.domain.errors import DispatchError
from app.domain.models.notification import Occasion
from app.services.notification_service import NotificationService


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service


async def _trigger(occasion: Occasion, service: NotificationService) -> JSONResponse:
    try:
        await service.dispatch(occasion)
    except DispatchError as exc:
        return JSONResponse(status_code=500, content={"Message": exc.message})
    return JSONResponse(status_code=200, content={"Message": "Success"})


async def morning(service: NotificationService = Depends(get_notification_service)):
    return await _trigger(Occasion.MORNING, service)


async def night(service: NotificationService = Depends(get_notification_service)):
    return await _trigger(Occasion.EVENING, service)


def build_router(config: Settings) -> APIRouter:
    """Routes come from config so the scheduler and the app agree on paths."""
    router = APIRouter()
    router.add_api_route(config.MORNING_ROUTE, morning, methods=["GET"])
    router.add_api_route(config.EVENING_ROUTE, night, methods=["GET"])
    return router

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    state = request.app.state
    gateway = getattr(state, "gateway", None)
    scheduler = getattr(state, "scheduler", None)
    watchdog = getattr(state, "watchdog", None)

    connected = await gateway.is_connected() if gateway is not None else False

    return {
        "status": "healthy" if connected else "degraded",
        "service": "Countdown Notifier",
        "connected": connected,
        "scheduler": "running" if scheduler and scheduler.running else "stopped",
        "watchdog": "running" if watchdog and watchdog.running else "stopped",
    }

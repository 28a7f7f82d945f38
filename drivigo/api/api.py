from fastapi import APIRouter
from drivigo.api.endpoints import notifications, payment

api_router = APIRouter()
api_router.include_router(payment.router, tags=["payment"])
api_router.include_router(notifications.router, tags=["notifications"])

@api_router.get("/health", tags=["health"])
async def health_check():
    return {"status": "ok"}

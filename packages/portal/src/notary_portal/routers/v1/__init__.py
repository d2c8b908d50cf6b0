from fastapi import APIRouter

from notary_portal.routers.v1 import booking, chat, fees

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(fees.router)
v1_router.include_router(chat.router)
v1_router.include_router(booking.router)

from fastapi import APIRouter
from app.api.endpoints import contact, health

api_router = APIRouter()

api_router.include_router(contact.router, tags=["Contact"])
api_router.include_router(health.router, tags=["Health"])

from fastapi import APIRouter

from people_api.api.endpoints import employees, health, master_data

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(master_data.router)

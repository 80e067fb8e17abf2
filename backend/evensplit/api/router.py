"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from evensplit.api.routes import events, expenses, settlements

api_router = APIRouter()

# Include all route modules
api_router.include_router(events.router)
api_router.include_router(expenses.router)
api_router.include_router(settlements.router)

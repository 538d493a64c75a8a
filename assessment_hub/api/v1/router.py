"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from assessment_hub.api.v1 import assessments, clients, dashboard, health, templates

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Questionnaire templates
api_router.include_router(
    templates.router,
    prefix="/templates",
    tags=["templates"],
)

# Assessment lifecycle
api_router.include_router(
    assessments.router,
    prefix="/assessments",
    tags=["assessments"],
)

# Clients
api_router.include_router(
    clients.router,
    prefix="/clients",
    tags=["clients"],
)

# Clinician dashboard
api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"],
)

# /app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
# Import the business logic service that this router will use.
from ..services import dashboard_service
# Import the database service dependency provider.
from ..services.database_service import DatabaseService, get_db_service
# Import the Pydantic model to define the response shape (the API contract).
from ..models.dashboard_model import DashboardSummary

# --- APIRouter Instance ---
router = APIRouter()

# --- Endpoint Definition ---
@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Headline statistics, preview lists and chart series for the dashboard view."
)
def get_dashboard_summary(
    db: DatabaseService = Depends(get_db_service)
):
    """
    Thin router layer: all aggregation happens in `dashboard_service`, which
    recomputes everything from the full collections on every call.
    """
    return dashboard_service.get_summary_data(db=db)

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fitpartner.db import get_db
from fitpartner.deps.auth import get_current_user
from fitpartner.models import User
from fitpartner.schemas.stats import DashboardStats
from fitpartner.services.dashboard import get_dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return get_dashboard_stats(db, current)

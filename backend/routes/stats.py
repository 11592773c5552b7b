# backend/routes/stats.py

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from sqlalchemy import func
from datetime import datetime, time, timezone
from pydantic import BaseModel
from typing import List

from database import get_db
from utils.tokenJWT import require_admin
from models.visitor_log import VisitorLog

router = APIRouter(
    prefix="/stats",
    tags=["Stats"]
)

# Number of pages listed in the top pages ranking
TOP_PAGES_LIMIT = 10

# === Pydantic Response Schemas ===

class CountByKey(BaseModel):
    key: str
    count: int

class VisitorStats(BaseModel):
    total_visits: int
    today_visits: int
    unique_visitors: int
    device_stats: List[CountByKey]
    browser_stats: List[CountByKey]
    top_pages: List[CountByKey]


def _grouped_counts(db: Session, column, limit: int = None) -> List[CountByKey]:
    # Count visits per value, most frequent first
    query = (
        db.query(column, func.count(VisitorLog.id).label("count"))
        .group_by(column)
        .order_by(func.count(VisitorLog.id).desc(), column.asc())
    )
    if limit:
        query = query.limit(limit)
    return [CountByKey(key=row[0] or "Unknown", count=row[1]) for row in query.all()]


# === Endpoint: Visitor Summary ===

@router.get("/visitors", response_model=VisitorStats)
def get_visitor_stats(
    response: Response,
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    total_visits = db.query(func.count(VisitorLog.id)).scalar() or 0

    # Visits since midnight (UTC, matching the database clock)
    start_of_day = datetime.combine(datetime.now(timezone.utc).date(), time.min)
    today_visits = db.query(func.count(VisitorLog.id)).filter(
        VisitorLog.visited_at >= start_of_day
    ).scalar() or 0

    # Distinct client IPs
    unique_visitors = db.query(func.count(func.distinct(VisitorLog.ip_address))).scalar() or 0

    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
    return VisitorStats(
        total_visits=total_visits,
        today_visits=today_visits,
        unique_visitors=unique_visitors,
        device_stats=_grouped_counts(db, VisitorLog.device_type),
        browser_stats=_grouped_counts(db, VisitorLog.browser),
        top_pages=_grouped_counts(db, VisitorLog.page_url, limit=TOP_PAGES_LIMIT),
    )

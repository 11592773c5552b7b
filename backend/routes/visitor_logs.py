# backend/routes/visitor_logs.py
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from datetime import datetime

from database import get_db
from models.visitor_log import VisitorLog
from schemas.visitor_log import VisitIn, VisitorLogPage
from utils.audit import write_visit
from utils.tokenJWT import require_admin
from utils.user_agent import parse_user_agent, client_ip

router = APIRouter(prefix="/visitor-logs", tags=["Visitor logs"])

NO_STORE = "no-store, no-cache, must-revalidate"


# Record a storefront page view
@router.post("", status_code=status.HTTP_201_CREATED)
def log_visit(payload: VisitIn, request: Request, db: Session = Depends(get_db)):
    ua = request.headers.get("user-agent")
    info = parse_user_agent(ua)
    write_visit(
        db,
        page_url=payload.page_url or "/",
        ip=client_ip(request.headers, request.client.host if request.client else None),
        user_agent=ua,
        referrer=request.headers.get("referer") or payload.referrer,
        device_type=info.device_type,
        browser=info.browser,
        os=info.os,
        session_id=payload.session_id,
    )
    return {"success": True}


@router.get("", response_model=VisitorLogPage)
def get_visitor_logs(
    response: Response,
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=500),
    date_from: Optional[str] = Query(None, description="From date (YYYY-MM-DD)"),
    date_to: Optional[str] = Query(None, description="To date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    query = db.query(VisitorLog)

    if date_from:
        try:
            query = query.filter(VisitorLog.visited_at >= datetime.fromisoformat(date_from))
        except ValueError:
            pass # Ignore malformed dates

    if date_to:
        try:
            # A bare date covers the whole day
            dt_to_str = date_to
            if len(dt_to_str) == 10:
                dt_to_str += " 23:59:59"
            query = query.filter(VisitorLog.visited_at <= datetime.fromisoformat(dt_to_str))
        except ValueError:
            pass

    # Newest first
    query = query.order_by(VisitorLog.visited_at.desc(), VisitorLog.id.desc())

    total = query.count()
    logs = query.offset((page - 1) * page_size).limit(page_size).all()

    response.headers["Cache-Control"] = NO_STORE
    return {
        "items": logs,
        "total": total,
        "page": page,
        "page_size": page_size,
    }

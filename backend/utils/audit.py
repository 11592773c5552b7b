from typing import Optional
from sqlalchemy.orm import Session
from models.visitor_log import VisitorLog

def write_visit(db: Session, *, page_url, ip=None, user_agent=None, referrer=None,
                device_type=None, browser=None, os=None, session_id: Optional[str] = None):
    entry = VisitorLog(
        page_url=page_url or "/", ip_address=ip, user_agent=user_agent, referrer=referrer,
        device_type=device_type, browser=browser, os=os, session_id=session_id,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry

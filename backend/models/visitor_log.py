from sqlalchemy import Column, Integer, String, DateTime, func
from database import Base

# Append-only record of a single storefront page visit
class VisitorLog(Base):
    __tablename__ = "visitor_logs"

    id = Column(Integer, primary_key=True, index=True)

    # Visit timestamp and page
    visited_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    page_url = Column(String, nullable=False, default="/", index=True)
    referrer = Column(String, nullable=True)
    session_id = Column(String(64), nullable=True)

    # Client details derived from request headers
    ip_address = Column(String(64), nullable=True, index=True)
    user_agent = Column(String, nullable=True)
    device_type = Column(String(20), nullable=True)
    browser = Column(String(20), nullable=True)
    os = Column(String(20), nullable=True)

    # Reserved for geolocation lookups, currently never populated
    country = Column(String(64), nullable=True)
    city = Column(String(64), nullable=True)

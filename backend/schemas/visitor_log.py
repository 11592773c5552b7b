from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime


# Request schema sent by the storefront on every page view
class VisitIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page_url: Optional[str] = None
    referrer: Optional[str] = None
    session_id: Optional[str] = None


class VisitorLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    visited_at: datetime
    page_url: str
    referrer: Optional[str] = None
    session_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    device_type: Optional[str] = None
    browser: Optional[str] = None
    os: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None


class VisitorLogPage(BaseModel):
    items: List[VisitorLogResponse]
    total: int
    page: int
    page_size: int

# backend/utils/user_agent.py
import re
from typing import NamedTuple, Optional, Mapping

UNKNOWN = "Unknown"


class ClientInfo(NamedTuple):
    device_type: str
    browser: str
    os: str


def _has(pattern: str, ua: str) -> bool:
    return re.search(pattern, ua, re.IGNORECASE) is not None


def parse_user_agent(ua: Optional[str]) -> ClientInfo:
    """Coarse device/browser/OS classification from a User-Agent header."""
    if not ua:
        return ClientInfo(UNKNOWN, UNKNOWN, UNKNOWN)

    device = "Desktop"
    if _has(r"mobile", ua):
        device = "Mobile"
    elif _has(r"tablet|ipad", ua):
        device = "Tablet"

    # Order matters: Edge and Chrome both advertise Safari
    browser = UNKNOWN
    if _has(r"edg", ua):
        browser = "Edge"
    elif _has(r"chrome", ua):
        browser = "Chrome"
    elif _has(r"safari", ua):
        browser = "Safari"
    elif _has(r"firefox", ua):
        browser = "Firefox"
    elif _has(r"opera|opr", ua):
        browser = "Opera"

    os_name = UNKNOWN
    if _has(r"windows", ua):
        os_name = "Windows"
    elif _has(r"macintosh|mac os", ua):
        os_name = "macOS"
    elif _has(r"linux", ua):
        os_name = "Linux"
    elif _has(r"android", ua):
        os_name = "Android"
    elif _has(r"iphone|ipad|ipod", ua):
        os_name = "iOS"

    return ClientInfo(device, browser, os_name)


def client_ip(headers: Mapping[str, str], peer: Optional[str] = None) -> str:
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or "unknown"
    return headers.get("x-real-ip") or peer or "unknown"

"""
Per-client request limits (slowapi).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from polarbot.config import settings

limiter = Limiter(key_func=get_remote_address)

CHAT_LIMIT = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"

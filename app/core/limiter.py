"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings and decorators live here.
Decorated endpoints must accept a `request: Request` parameter.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

LOGIN_LIMIT = "10/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"
CHAT_LIMIT = "20/minute"
CONTACT_LIMIT = "5/minute"
UPLOAD_LIMIT = "30/minute"

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_chat = limiter.limit(CHAT_LIMIT)
limit_contact = limiter.limit(CONTACT_LIMIT)
limit_upload = limiter.limit(UPLOAD_LIMIT)

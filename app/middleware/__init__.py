"""Raw ASGI middleware wired in app.main.

Stack, outermost first: Timeout, RequestID, SecurityHeaders (then CORS).
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "SecurityHeadersMiddleware", "TimeoutMiddleware"]

"""
Security headers middleware.

Adds standard security headers to every response. Route decisions and
confirmation state are per user, so those responses are also marked
uncacheable.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}

NO_STORE_PREFIXES = ("/dashboard", "/api/confirm", "/api/routes", "/api/navigation")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        if request.url.path.startswith(NO_STORE_PREFIXES):
            response.headers["Cache-Control"] = "no-store"
        return response

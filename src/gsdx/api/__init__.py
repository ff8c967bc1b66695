"""HTTP layer — FastAPI transport over the service layer.

Routes translate HTTP requests into service requests and ServiceResult
envelopes into JSON responses. No business logic lives here.
"""

from gsdx.api.app import create_app

__all__ = ["create_app"]

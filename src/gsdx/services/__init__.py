"""Service layer — wire adapter returning ServiceResult.

Services may import from domain, usecases, and infrastructure layers.
They must never import from api, commands, or output.
"""

from gsdx.services.gsdx import GsdxService
from gsdx.services.migrate import MigrateService
from gsdx.services.result import ServiceError, ServiceResult

__all__ = ["GsdxService", "MigrateService", "ServiceError", "ServiceResult"]

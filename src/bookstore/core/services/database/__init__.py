from .db_manage import DbManageService, register_tables
from .db_session import DbSessionService
from .unit_of_work import UnitOfWork

__all__ = ["DbManageService", "DbSessionService", "UnitOfWork", "register_tables"]

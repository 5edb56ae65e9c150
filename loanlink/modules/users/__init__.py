# Users module
from loanlink.modules.users.models import User, DEFAULT_ROLE
from loanlink.modules.users.services import UserService
from loanlink.modules.users.router import router

__all__ = ["User", "DEFAULT_ROLE", "UserService", "router"]

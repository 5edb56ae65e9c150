# Loan applications module
from loanlink.modules.applications.models import LoanApplication
from loanlink.modules.applications.services import ApplicationService
from loanlink.modules.applications.router import router

__all__ = ["LoanApplication", "ApplicationService", "router"]

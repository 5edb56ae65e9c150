# Loans module
from loanlink.modules.loans.models import Loan
from loanlink.modules.loans.services import LoanService
from loanlink.modules.loans.router import router

__all__ = ["Loan", "LoanService", "router"]

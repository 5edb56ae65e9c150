"""
Test configuration and fixtures for LoanLink backend tests.
"""
import pytest
from typing import AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from loanlink.core.database import Database
from loanlink.core.dependencies import get_token_verifier
from loanlink.core.security import TokenVerificationError
from main import app


# ============================================================
# Database Fixtures
# ============================================================

# Use SQLite for testing (in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create a fresh in-memory database for each test"""
    db = Database(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    await db.connect()

    yield db

    await db.close()


@pytest.fixture
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for service-level tests"""
    async with database.sessionmaker() as session:
        yield session
        await session.rollback()


# ============================================================
# Auth Fixtures
# ============================================================

BORROWER_EMAIL = "borrower@loanlink.test"
MANAGER_EMAIL = "manager@loanlink.test"


class FakeTokenVerifier:
    """Accepts a fixed set of tokens instead of calling Firebase"""

    def __init__(self, tokens: Dict[str, str]):
        self.tokens = tokens

    async def verify_id_token(self, token: str) -> Dict[str, str]:
        if token not in self.tokens:
            raise TokenVerificationError("Invalid token: Signature verification failed.")
        email = self.tokens[token]
        return {"sub": email.split("@")[0], "email": email}


@pytest.fixture
def token_verifier() -> FakeTokenVerifier:
    return FakeTokenVerifier({
        "borrower-token": BORROWER_EMAIL,
        "manager-token": MANAGER_EMAIL,
    })


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    """Auth headers for the borrower"""
    return {"Authorization": "Bearer borrower-token"}


@pytest.fixture
def manager_headers() -> Dict[str, str]:
    return {"Authorization": "Bearer manager-token"}


# ============================================================
# Client Fixtures
# ============================================================

@pytest.fixture
async def client(database, token_verifier) -> AsyncGenerator[AsyncClient, None]:
    """Create test client wired to the test database and fake verifier"""
    app.state.database = database
    app.dependency_overrides[get_token_verifier] = lambda: token_verifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ============================================================
# Document Fixtures
# ============================================================

@pytest.fixture
async def test_loan(client) -> dict:
    """Create a loan through the API and return its stored document"""
    response = await client.post("/add-loan", json={
        "title": "Small Business Loan",
        "category": "business",
        "interestRate": 7.5,
        "maxLoanLimit": 50000,
        "amount": 1000,
        "createdBy": MANAGER_EMAIL,
        "emiPlans": ["3 months", "6 months"],
    })
    loan_id = response.json()["insertedId"]

    response = await client.get(f"/loan/{loan_id}")
    return response.json()


@pytest.fixture
async def test_applications(client) -> list:
    """Create three applications with different borrowers and statuses"""
    applications = [
        {"loanTitle": "Small Business Loan", "borrowerEmail": BORROWER_EMAIL, "status": "pending", "loanAmount": 2000},
        {"loanTitle": "Education Loan", "borrowerEmail": BORROWER_EMAIL, "status": "approved", "updatedBy": MANAGER_EMAIL},
        {"loanTitle": "Car Loan", "borrowerEmail": "other@loanlink.test", "status": "approved", "updatedBy": "admin@loanlink.test"},
    ]
    ids = []
    for body in applications:
        response = await client.post("/applications", json=body)
        ids.append(response.json()["insertedId"])
    return ids

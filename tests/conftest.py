"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi import FastAPI
from fastapi.testclient import TestClient
from decision_engine.api.main import create_app
from decision_engine.domain.engine import DecisionEngine
from decision_engine.domain.lifetime import ExpectedLifetimeTable
from decision_engine.domain.models import LoanPolicy


# Fixed evaluation day so ages derived from personal codes are stable
TODAY = date(2026, 10, 19)

# Real Estonian personal codes, all born 1990-02-01 (Latvia bucket by first digit)
DEBTOR_CODE = "49002010965"  # segment 0965
SEGMENT_1_CODE = "49002013008"  # segment 3008
SEGMENT_2_CODE = "49002016010"  # segment 6010
SEGMENT_3_CODE = "49002018004"  # segment 8004


class AcceptAllValidator:
    """Stands in for the checksum validator when a test targets later checks"""

    def is_valid(self, personal_code: str) -> bool:
        return True


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def policy() -> LoanPolicy:
    return LoanPolicy()


@pytest.fixture
def lifetime_table() -> ExpectedLifetimeTable:
    return ExpectedLifetimeTable()


@pytest.fixture
def engine(policy: LoanPolicy, lifetime_table: ExpectedLifetimeTable) -> DecisionEngine:
    """Engine with the real personal code validator"""
    return DecisionEngine(policy=policy, lifetime_table=lifetime_table)


@pytest.fixture
def lenient_engine(policy: LoanPolicy, lifetime_table: ExpectedLifetimeTable) -> DecisionEngine:
    """Engine that accepts any personal code as structurally valid"""
    return DecisionEngine(policy=policy, validator=AcceptAllValidator(), lifetime_table=lifetime_table)


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)

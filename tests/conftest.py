from __future__ import annotations

from datetime import datetime

import pytest

from employee_attendance.config import Settings
from employee_attendance.container import build_container
from employee_attendance.database.memory import InMemoryAttendanceRepository, InMemoryUserRepository
from employee_attendance.main import create_app

TEST_SECRET = "test-secret-for-signing-session-tokens"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret=TEST_SECRET, store="memory", testing=True, log_level="DEBUG")


@pytest.fixture
def users_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def attendance_repo() -> InMemoryAttendanceRepository:
    return InMemoryAttendanceRepository()


@pytest.fixture
def container(settings, users_repo, attendance_repo):
    return build_container(settings, users_repo=users_repo, attendance_repo=attendance_repo)


@pytest.fixture
def app(settings, container):
    return create_app(settings, container=container)


@pytest.fixture
def client(app):
    return app.test_client()

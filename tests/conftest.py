import os

# Rate Limiter 우회를 위한 테스트 환경 변수 설정
os.environ["TESTING"] = "true"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from faker import Faker
from main import app


@pytest_asyncio.fixture
async def client():
    """API 테스트를 위한 Async Client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake():
    return Faker()


@pytest.fixture
def arbitrary_passwords(fake):
    """임의 입력 모음 (허용 외 문자, 공백, 짧은/긴 문자열 포함)."""
    Faker.seed(20261019)
    samples = ["", "a", "aaa", "~~~~~~~~~", "        ", "Ab1#", "ÄÖÜ密码🔑"]
    samples += [fake.password(length=n) for n in range(4, 40, 3)]
    samples += [fake.pystr(min_chars=1, max_chars=30) for _ in range(10)]
    samples += [fake.text(max_nb_chars=40) for _ in range(10)]
    return samples

"""Fixtures for API tests against the in-memory container."""

from dataclasses import dataclass

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from tests.di import build_test_container
from tube.interface.api.app import create_app


@dataclass
class ApiEnv:
    """HTTP client plus the container backing the app, for seeding data."""

    client: httpx.AsyncClient
    container: AsyncContainer

    async def get(self, dependency):
        return await self.container.get(dependency)


@pytest_asyncio.fixture
async def api_env():
    container = build_test_container()
    app = create_app(container)
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield ApiEnv(client=client, container=container)

    await container.close()

# ==============================
# Testing Fixtures
# ==============================
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from table_to_image.config import Settings
from table_to_image.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the host environment and any .env file."""
    return Settings(
        quickchart_base_url="https://quickchart.example/chart",
        max_table_size=100,
        default_format="png",
        default_width=800,
        default_height=600,
    )


@pytest.fixture
def app_client(settings: Settings) -> TestClient:
    app = create_app(settings)
    client = TestClient(app)
    yield client
    client.close()

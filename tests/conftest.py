import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure `import canvas_backend...` works without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def client(tmp_path: Path) -> TestClient:
    from canvas_backend.config import AppConfig
    from canvas_backend.main import create_app

    app = create_app(AppConfig(data_dir=tmp_path))
    return TestClient(app)

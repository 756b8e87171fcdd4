from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from bloodwork_api.config import settings
from bloodwork_api.database import Base, get_db, make_engine
from bloodwork_api.main import app
from bloodwork_api.routers.deps import get_upload_limiter
from bloodwork_api.services.rate_limit import UploadRateLimiter


@pytest.fixture(autouse=True)
def upload_tmp_dir(tmp_path, monkeypatch):
    staging = tmp_path / "staging"
    staging.mkdir()
    monkeypatch.setattr(settings, "upload_tmp_dir", str(staging))
    return staging


@pytest.fixture()
def db_session() -> Generator:
    engine = make_engine("sqlite://")
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def upload_limiter() -> UploadRateLimiter:
    return UploadRateLimiter("3/minute")


@pytest.fixture()
def client(db_session, upload_limiter, monkeypatch) -> Generator[TestClient, None, None]:
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upload_limiter] = lambda: upload_limiter

    # Tests use an in-memory DB via dependency override; skip the migration check.
    monkeypatch.setattr(settings, "verify_schema_on_startup", False)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

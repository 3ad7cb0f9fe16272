"""
Point the app at a throwaway sqlite database before any test module
imports fitpartner (settings and the engine are built at import time).
"""
import os
import tempfile

import pytest

_tmpdir = tempfile.mkdtemp(prefix="fitpartner-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"


@pytest.fixture(scope="session", autouse=True)
def _create_schema():
    from fitpartner.db import Base, engine
    from fitpartner import models  # noqa: F401

    Base.metadata.create_all(engine)
    yield
    engine.dispose()

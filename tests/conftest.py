import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config environment so that modules creating the app at import
    time (``app.app``) pick up the test overlay.
    """
    os.environ["SHOPFRONT_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def config(request):
    from shared.config import load_config

    return load_config(env=request.config.option.env)


@pytest.fixture()
def container(config):
    """A fresh service container; stores are emptied after every test."""
    from app import Container

    container = Container(config)

    yield container

    container.reset()


@pytest.fixture()
def client(container):
    from app import create_app
    from fastapi.testclient import TestClient

    return TestClient(create_app(container))

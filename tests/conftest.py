import logging

import pytest


@pytest.fixture
def isolated_logging(monkeypatch):
    """Give `setup_logging` a private root handler list and restore levels after."""
    root = logging.getLogger()
    package_logger = logging.getLogger("simpleargparse")
    root_level, package_level = root.level, package_logger.level
    handlers: list[logging.Handler] = []
    monkeypatch.setattr(root, "handlers", handlers)
    yield handlers
    for handler in handlers:
        handler.close()
    root.setLevel(root_level)
    package_logger.setLevel(package_level)

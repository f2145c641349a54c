import logging

import pytest


@pytest.fixture()
def restore_logging():
    """Put the root and ``clockwork32`` loggers back as they were."""

    root = logging.getLogger()
    pkg = logging.getLogger("clockwork32")
    root_level, root_handlers, pkg_level = root.level, list(root.handlers), pkg.level
    yield
    for handler in root.handlers:
        if handler not in root_handlers:
            root.removeHandler(handler)
    root.setLevel(root_level)
    pkg.setLevel(pkg_level)

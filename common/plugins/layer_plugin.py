import time

import pytest

LAYERS = ["unit", "contract", "property", "integration", "e2e"]


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: single-module tests")
    config.addinivalue_line("markers", "contract: shape of public data structures")
    config.addinivalue_line("markers", "property: hypothesis-driven property tests")
    config.addinivalue_line("markers", "integration: several modules together")
    config.addinivalue_line("markers", "e2e: full order flow")
    config.addinivalue_line("markers", "slow: skipped under --env=prod")


# run cheap layers first
def pytest_collection_modifyitems(config, items):
    if config.getoption("--env") == "prod":
        for item in items:
            if item.get_closest_marker("slow") is not None:
                item.add_marker(pytest.mark.skip(reason="slow tests are skipped in prod"))

    def layer(item):
        markers = {m.name for m in item.iter_markers()}
        for index, name in enumerate(LAYERS):
            if name in markers:
                return index
        return len(LAYERS)

    items.sort(key=layer)


def pytest_sessionstart(session):
    session.config._coffee_start = time.time()


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    duration = time.time() - getattr(config, "_coffee_start", time.time())
    stats = terminalreporter.stats
    terminalreporter.write_sep("=", "coffee_order summary")
    terminalreporter.write_line(
        "env: {}  passed: {}  failed: {}  skipped: {}  ({:.2f}s)".format(
            config.getoption("--env"),
            len(stats.get("passed", [])),
            len(stats.get("failed", [])),
            len(stats.get("skipped", [])),
            duration,
        )
    )

import logging

import pytest
from hypothesis import HealthCheck, settings

from common.factories import make_base, make_chain

pytest_plugins = [
    "common.plugins.layer_plugin",
]

# clean_config is function scoped and only resets env vars
settings.register_profile("dev", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.register_profile("prod", parent=settings.get_profile("dev"), max_examples=50)


def pytest_addoption(parser):
    parser.addoption("--env", action="store", default="dev", choices=["dev", "prod"], help="test environment")


def pytest_configure(config):
    settings.load_profile(config.getoption("--env"))


@pytest.fixture(scope="function")
def set_promo(monkeypatch):
    monkeypatch.setenv("COFFEE_PROMO_CODE", "SAVE10")
    yield
    monkeypatch.delenv("COFFEE_PROMO_CODE", raising=False)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    # a developer shell may export these
    monkeypatch.delenv("COFFEE_PROMO_CODE", raising=False)
    monkeypatch.delenv("COFFEE_PRICE_PRECISION", raising=False)


@pytest.fixture(scope="function")
def log_capture(caplog):
    caplog.set_level(logging.DEBUG, logger="coffee_order")
    return caplog


@pytest.fixture
def simple_coffee():
    return make_base()


@pytest.fixture
def full_chain():
    return make_chain()


def pytest_generate_tests(metafunc):
    if "depth" in metafunc.fixturenames:
        metafunc.parametrize("depth", [0, 1, 2, 3], ids=["plain", "milk", "milk-sugar", "milk-sugar-cream"])

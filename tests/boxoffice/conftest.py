import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def boxoffice_bed():
    from boxoffice.domain import boxoffice

    bed = DomainFixture(boxoffice)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(boxoffice_bed):
    with boxoffice_bed.domain_context():
        yield

        # Clear placed orders and drained events between tests
        for provider in current_domain.providers.values():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def catalog():
    """A freshly loaded seed catalogue, so inventory changes never leak between tests."""
    from boxoffice.catalog.loader import load_catalog
    from boxoffice.catalog.seed import seed_data

    return load_catalog(seed_data())


@pytest.fixture()
def cart(catalog):
    from boxoffice.cart.store import CartStore

    return CartStore(catalog)


@pytest.fixture()
def coordinator():
    from boxoffice.checkout.coordinator import CheckoutCoordinator

    return CheckoutCoordinator()

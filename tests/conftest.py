import pytest

from locale_master.i18n import registry


@pytest.fixture(autouse=True)
def reset_default_locale_master():
    """Make sure no test leaks a default LocaleMaster into the next one."""
    registry.reset_default()
    yield
    registry.reset_default()

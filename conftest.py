import pytest
from css_selector_builder import CssSelectorBuilder

@pytest.fixture
def builder():
    """Return an instance of the CssSelectorBuilder facade."""
    return CssSelectorBuilder()

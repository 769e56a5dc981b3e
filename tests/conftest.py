import pytest

from scalargrad.core.tape import use_tape


@pytest.fixture
def tape():
    """Each test records on its own fresh tape."""
    with use_tape() as t:
        yield t

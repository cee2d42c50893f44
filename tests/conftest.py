import pytest


@pytest.fixture
def lines():
    return []


@pytest.fixture
def echo(lines):
    return lines.append

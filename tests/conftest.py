"""Pytest configuration and shared fixtures for optionalkit tests."""

import pytest


@pytest.fixture
def person_a():
    """A person record that owns a cat."""
    return {'name': 'Dima Komarov', 'has_cat': True}


@pytest.fixture
def person_b():
    """A person record without a cat."""
    return {'name': 'Vanya Vinogradov', 'has_cat': False}


@pytest.fixture
def sample_present(person_a):
    """Present Optional holding person_a."""
    from optionalkit import some

    return some(person_a)


@pytest.fixture
def sample_empty():
    """The empty Optional."""
    from optionalkit import empty

    return empty

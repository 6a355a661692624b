"""Shared fixtures: a fresh board and app for every test."""

import pytest
from fastapi.testclient import TestClient

from logic.board import BoardState
from main import create_app


@pytest.fixture
def board():
    return BoardState()


@pytest.fixture
def app(board):
    return create_app(board)


@pytest.fixture
def client(app):
    return TestClient(app)

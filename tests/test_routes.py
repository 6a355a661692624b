"""
Tests for the HTTP routes.

Run with: python -m pytest tests/test_routes.py
"""

import pytest


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "<h1>Babysquares</h1>" in response.text
    assert response.text.count("<td ") == 100


def test_edit_square_returns_form(client, board):
    board.set_cell(3, 7, "Alice")
    response = client.get("/edit-square", params={"row": "3", "col": "7"})
    assert response.status_code == 200
    assert '<td id="cell-3-7">' in response.text
    assert 'name="buyer" value="Alice"' in response.text


@pytest.mark.parametrize(
    "params",
    [
        {"row": "10", "col": "0"},
        {"row": "0", "col": "-1"},
        {"row": "abc", "col": "1"},
        {"row": "\u0663", "col": "1"},
        {"row": "+3", "col": "1"},
        {"row": "0_3", "col": "1"},
        {"row": "1"},
        {},
    ],
)
def test_edit_square_rejects_bad_coordinates(client, params):
    response = client.get("/edit-square", params=params)
    assert response.status_code == 400
    assert "Invalid coordinate" in response.text


def test_update_square_claims(client, board):
    response = client.post("/update-square", data={"row": "3", "col": "7", "buyer": "Alice"})
    assert response.status_code == 200
    assert response.text.startswith('<td id="cell-3-7"')
    assert ">Alice</td>" in response.text
    assert board.get_cell(3, 7) == "Alice"


def test_update_square_without_buyer_clears(client, board):
    board.set_cell(1, 1, "Bob")
    response = client.post("/update-square", data={"row": "1", "col": "1"})
    assert response.status_code == 200
    assert board.get_cell(1, 1) == ""


def test_update_square_rejects_out_of_bounds(client, board):
    before = board.get_snapshot()
    response = client.post("/update-square", data={"row": "10", "col": "10", "buyer": "X"})
    assert response.status_code == 400
    assert board.get_snapshot() == before


def test_update_board_changes_settings(client, board):
    board.set_cell(9, 9, "Bob")
    response = client.post(
        "/update-board",
        data={"boardTitle": "Party Board", "xLabels": "a, b, c", "yLabels": ""},
    )
    assert response.status_code == 200
    assert response.text.startswith('<div id="board-wrapper">')
    assert "<th>a</th>" in response.text

    snapshot = board.get_snapshot()
    assert snapshot.title == "Party Board"
    assert snapshot.x_labels == ("a", "b", "c")
    assert list(snapshot.y_labels) == [str(i) for i in range(10)]
    assert board.get_cell(9, 9) == "Bob"


def test_update_board_with_no_fields(client, board):
    before = board.get_snapshot()
    response = client.post("/update-board", data={})
    assert response.status_code == 200
    assert board.get_snapshot() == before


def test_api_board(client, board):
    board.set_cell(0, 0, "Zed")
    response = client.get("/api/board")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Babysquares"
    assert data["board"][0][0] == "Zed"
    assert len(data["y_labels"]) == 10


def test_health(client, board):
    board.set_cell(2, 2, "Amy")
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["claimed_squares"] == 1
    assert data["uptime_seconds"] >= 0
    assert "started_at" in data


def test_each_app_has_its_own_board():
    from fastapi.testclient import TestClient

    from main import create_app

    first = TestClient(create_app())
    second = TestClient(create_app())
    first.post("/update-square", data={"row": "0", "col": "0", "buyer": "A"})
    assert second.get("/api/board").json()["board"][0][0] == ""


def test_update_square_rejects_signed_coordinate(client, board):
    response = client.post("/update-square", data={"row": "+3", "col": "7", "buyer": "X"})
    assert response.status_code == 400
    assert board.get_cell(3, 7) == ""

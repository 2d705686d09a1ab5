def press(client, *keys):
    response = None
    for key in keys:
        response = client.post("/api/game/key", json={"key": key})
    return response


def test_health_reports_service_status(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "healthy"
    assert data["game_in_progress"] is False
    assert data["word_source"] == "StubWordSource"


def test_state_before_new_game_is_not_found(client) -> None:
    response = client.get("/api/game/state")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_key_before_new_game_is_not_found(client) -> None:
    response = client.post("/api/game/key", json={"key": "A"})

    assert response.status_code == 404


def test_new_game_returns_initial_state(client) -> None:
    response = client.post("/api/new_game")

    assert response.status_code == 200
    data = response.get_json()
    assert data["success"] is True
    assert data["state"]["current_round"] == 0
    assert data["state"]["status"] == "in_progress"
    assert data["state"]["answer"] is None


def test_key_press_returns_events_and_state(client) -> None:
    client.post("/api/new_game")

    response = client.post("/api/game/key", json={"key": "r"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["events"] == [{"kind": "cell_updated", "row": 0, "col": 0, "letter": "R"}]
    assert data["state"]["current_guess"] == "R"


def test_key_requires_key_field(client) -> None:
    client.post("/api/new_game")

    response = client.post("/api/game/key", json={})

    assert response.status_code == 400


def test_letter_backspace_and_commit_endpoints(client) -> None:
    client.post("/api/new_game")
    for letter in "REACX":
        client.post("/api/game/letter", json={"letter": letter})

    backspace = client.post("/api/game/backspace").get_json()
    assert backspace["events"] == [{"kind": "cell_updated", "row": 0, "col": 4, "letter": None}]

    client.post("/api/game/letter", json={"letter": "T"})
    data = client.post("/api/game/commit").get_json()

    kinds = [event["kind"] for event in data["events"]]
    assert kinds == ["loading_changed", "loading_changed", "row_scored"]
    assert [cell["status"] for cell in data["events"][-1]["outcomes"]] == [
        "present", "present", "correct", "present", "absent",
    ]
    assert data["state"]["current_round"] == 1


def test_commit_of_unknown_word_flags_row(client) -> None:
    client.post("/api/new_game")

    data = press(client, "Q", "W", "E", "R", "T", "Enter").get_json()

    assert data["events"][-1] == {"kind": "invalid_word", "row": 0}
    assert data["state"]["current_round"] == 0
    assert data["state"]["current_guess"] == "QWERT"


def test_winning_guess_ends_game(client) -> None:
    client.post("/api/new_game")

    data = press(client, "C", "R", "A", "N", "E", "Enter").get_json()

    assert data["events"][-1] == {"kind": "game_ended", "result": "won", "target_word": None}
    assert data["state"]["status"] == "won"
    assert data["state"]["answer"] == "CRANE"

    state = client.get("/api/game/state").get_json()["state"]
    assert state["guesses"] == ["CRANE"]


def test_losing_game_reveals_target(client) -> None:
    client.post("/api/new_game")

    data = None
    for guess in ["REACT", "RANCH", "GHOST", "TRAIN", "PLACE", "GHOST"]:
        data = press(client, *guess, "Enter").get_json()

    assert data["events"][-1] == {"kind": "game_ended", "result": "lost", "target_word": "CRANE"}
    assert data["state"]["status"] == "lost"

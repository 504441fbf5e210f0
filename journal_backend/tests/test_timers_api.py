# tests/test_timers_api.py
# Purpose:
# Brew timer driven over HTTP by an external 1s clock (the test plays the clock).

def test_timer_lifecycle(client):
    r = client.post("/api/timers")
    assert r.status_code == 200, r.text
    t = r.json()
    tid = t["timer_id"]
    assert t["state"] == "idle" and t["display"] == "00:00"

    client.post(f"/api/timers/{tid}/start")
    client.post(f"/api/timers/{tid}/start")
    for _ in range(125):
        client.post(f"/api/timers/{tid}/tick")
    t = client.get(f"/api/timers/{tid}").json()
    assert t["elapsed_seconds"] == 125 and t["display"] == "02:05" and t["running"] is True

    t = client.post(f"/api/timers/{tid}/pause").json()
    assert t["state"] == "paused"
    t = client.post(f"/api/timers/{tid}/tick").json()
    assert t["elapsed_seconds"] == 125

    t = client.post(f"/api/timers/{tid}/reset").json()
    assert t["state"] == "idle" and t["elapsed_seconds"] == 0

    assert client.delete(f"/api/timers/{tid}").json() == {"ok": True}
    assert client.get(f"/api/timers/{tid}").status_code == 404

def test_named_timer_and_bad_action(client):
    t = client.post("/api/timers", json={"timer_id": "v60"}).json()
    assert t["timer_id"] == "v60"
    assert client.post("/api/timers/v60/rewind").status_code == 404
    assert client.post("/api/timers/nope/start").status_code == 404

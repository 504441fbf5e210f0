# tests/test_pantry_api.py
# Purpose:
# Pantry (inventory) and wishlist CRUD, plus moving a wishlist entry into the pantry.

def test_inventory_crud_and_filters(client):
    r = client.post("/api/inventory", json={"name": "Bourbon Amarelo", "weight_g": "250", "opened": "yes"})
    assert r.status_code == 200, r.text
    item = r.json()["item"]
    assert item["weight_g"] == 250 and item["opened"] is True

    client.post("/api/inventory", json={"name": "Catuaí", "brand": "Orfeu"})

    closed = client.get("/api/inventory", params={"opened": False}).json()["items"]
    assert [i["name"] for i in closed] == ["Catuaí"]

    hits = client.get("/api/inventory", params={"q": "orfeu"}).json()["items"]
    assert len(hits) == 1

    r = client.patch(f"/api/inventory/{item['id']}", json={"weight_g": 120})
    assert r.json()["item"]["weight_g"] == 120

    assert client.delete(f"/api/inventory/{item['id']}").json()["ok"] is True
    assert client.get(f"/api/inventory/{item['id']}").status_code == 404

def test_inventory_requires_name(client):
    assert client.post("/api/inventory", json={"weight_g": 250}).status_code == 422

def test_wishlist_crud(client):
    r = client.post("/api/wishlist", json={"name": "Geisha", "price": "189.90", "where_to_buy": "Daterra"})
    wid = r.json()["item"]["id"]
    assert r.json()["item"]["price"] == 189.9

    r = client.patch(f"/api/wishlist/{wid}", json={"notes": "presente"})
    assert r.json()["item"]["notes"] == "presente"
    assert len(client.get("/api/wishlist").json()["items"]) == 1

    assert client.delete(f"/api/wishlist/{wid}").status_code == 200
    assert client.get("/api/wishlist").json()["items"] == []

def test_purchase_moves_entry_to_pantry(client):
    wid = client.post("/api/wishlist", json={"name": "Geisha", "origin": "Panamá"}).json()["item"]["id"]

    r = client.post(f"/api/wishlist/{wid}/purchase", json={"weight_g": 100})
    assert r.status_code == 200, r.text
    item = r.json()["item"]
    assert item["name"] == "Geisha" and item["origin"] == "Panamá" and item["weight_g"] == 100

    assert client.get(f"/api/wishlist/{wid}").status_code == 404
    assert [i["name"] for i in client.get("/api/inventory").json()["items"]] == ["Geisha"]

    assert client.post(f"/api/wishlist/{wid}/purchase").status_code == 404

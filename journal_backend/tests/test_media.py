# tests/test_media.py
import pytest

from journal_backend.app.services.data_stores.media import MediaError, delete_media, path_for_url, save_upload
from journal_backend.app.utils.strings import safe_filename

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

def test_upload_and_serve(client, data_dir):
    r = client.post("/api/media/upload", files={"file": ("Bag photo.PNG", PNG, "image/png")})
    assert r.status_code == 200, r.text
    url = r.json()["url"]
    assert url.startswith("/media/") and url.endswith("-Bag_photo.png")
    assert (data_dir / "media" / url.rsplit("/", 1)[-1]).read_bytes() == PNG

    served = client.get(url)
    assert served.status_code == 200 and served.content == PNG

def test_upload_rejects_empty_and_non_images(client):
    r = client.post("/api/media/upload", files={"file": ("x.png", b"", "image/png")})
    assert r.status_code == 400
    r = client.post("/api/media/upload", files={"file": ("notes.txt", b"hello", "text/plain")})
    assert r.status_code == 400

def test_save_and_delete_direct():
    url = save_upload("../../etc/photo.jpg", b"jpegbytes")
    assert "/" not in url[len("/media/"):]
    assert delete_media(url)
    assert not delete_media(url)
    assert not delete_media("https://elsewhere/photo.jpg")
    with pytest.raises(MediaError):
        save_upload("photo", b"data")

def test_image_url_round_trips_through_a_review(client):
    url = client.post("/api/media/upload", files={"file": ("bag.jpg", b"jpg", "image/jpeg")}).json()["url"]
    rev = client.post("/api/reviews", json={"coffee_name": "Com foto", "image_url": url}).json()["review"]
    assert client.get(f"/api/reviews/{rev['id']}").json()["review"]["image_url"] == url

def _upload(client, name):
    return client.post("/api/media/upload", files={"file": (name, PNG, "image/png")}).json()["url"]

def test_deleting_a_review_removes_its_photo(client):
    url = _upload(client, "bag.png")
    assert path_for_url(url).exists()
    rid = client.post("/api/reviews", json={"coffee_name": "Com foto", "image_url": url}).json()["review"]["id"]
    assert client.delete(f"/api/reviews/{rid}").json() == {"ok": True}
    assert not path_for_url(url).exists()
    assert client.get(url).status_code == 404

def test_replacing_a_photo_removes_the_old_file(client):
    old, new = _upload(client, "old.png"), _upload(client, "new.png")
    iid = client.post("/api/inventory", json={"name": "Pacote", "image_url": old}).json()["item"]["id"]
    r = client.patch(f"/api/inventory/{iid}", json={"image_url": new})
    assert r.status_code == 200, r.text
    assert not path_for_url(old).exists()
    assert path_for_url(new).exists()

def test_purchase_keeps_the_photo_with_the_pantry_item(client):
    url = _upload(client, "wish.png")
    wid = client.post("/api/wishlist", json={"name": "Desejo", "image_url": url}).json()["item"]["id"]
    item = client.post(f"/api/wishlist/{wid}/purchase", json={}).json()["item"]
    assert item["image_url"] == url and path_for_url(url).exists()

@pytest.mark.parametrize("raw,expected", [("a/b/c.jpg", "c.jpg"), ("", "file"), ("..", "file"), ("Média.png", "Media.png")])
def test_safe_filename(raw, expected):
    assert safe_filename(raw) == expected

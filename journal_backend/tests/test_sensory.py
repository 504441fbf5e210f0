# tests/test_sensory.py
# Purpose:
# Sensory profile defaults/coercion and the record -> radar glue.
import pytest

from journal_backend.app.brew.sensory import SensoryProfile, radar_for_record, snap_half
from journal_backend.app.db.models import Review

def test_defaults_for_missing_fields():
    p = SensoryProfile.from_record({})
    assert (p.acidity, p.body, p.sweetness, p.bitterness, p.aroma) == (3, 3, 3, 2, 4)

def test_text_and_garbage_values():
    p = SensoryProfile.from_record({"acidity": "4.5", "body": "", "aroma": "lots", "bitterness": None})
    assert p.acidity == 4.5
    assert p.body == 3
    assert p.aroma == 4
    assert p.bitterness == 2

def test_reads_orm_rows():
    row = Review(coffee_name="x", acidity=1.5, body=5)
    p = SensoryProfile.from_record(row)
    assert p.acidity == 1.5 and p.body == 5

def test_axes_order_starts_with_acidity():
    labels = [label for label, _ in SensoryProfile().axes()]
    assert labels == ["Acidity", "Body", "Sweetness", "Bitterness", "Aroma"]

def test_radar_for_record_puts_acidity_on_top():
    geo = radar_for_record({"acidity": 5}, size=300)
    top = geo.polygon[0]
    assert top[0] == pytest.approx(150.0)
    assert top[1] == pytest.approx(150.0 - 105.0)

@pytest.mark.parametrize("raw,expected", [(3.3, 3.5), (3.2, 3.0), (0, 1.0), (9, 5.0), ("2.75", 3.0)])
def test_snap_half(raw, expected):
    assert snap_half(raw) == expected

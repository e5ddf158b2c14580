import pytest

from hotbar import NUM_SLOTS, Hotbar, SlotOutOfRangeError
from hotbar.exceptions import HotbarError
from hotbar.items import ring, weapon


def test_new_hotbar_is_empty_with_fixed_capacity():
    hb = Hotbar()
    assert hb.get_num_slots() == NUM_SLOTS == 8
    assert all(hb.get_item(slot) is None for slot in range(NUM_SLOTS))


def test_custom_capacity_and_invalid_capacity():
    assert Hotbar(num_slots=3).get_num_slots() == 3
    with pytest.raises(ValueError):
        Hotbar(num_slots=0)


def test_put_returns_previous_item():
    hb = Hotbar()
    sword = weapon(0, "Excalibur")
    band = ring(2, "Ring of Teleportation")

    assert hb.put_item_into_slot(sword, 2) is None
    assert hb.get_item(2) is sword
    assert hb.put_item_into_slot(band, 2) is sword
    assert hb.put_item_into_slot(None, 2) is band
    assert hb.get_item(2) is None


@pytest.mark.parametrize("slot", [-1, 8, 9, 100])
def test_get_item_out_of_range_raises(slot):
    hb = Hotbar()
    with pytest.raises(SlotOutOfRangeError) as excinfo:
        hb.get_item(slot)
    assert excinfo.value.slot == slot
    assert str(excinfo.value) == "slot must be between 0 and 7"


def test_out_of_range_error_is_an_index_error():
    hb = Hotbar()
    with pytest.raises(IndexError):
        hb.get_item(8)
    with pytest.raises(HotbarError):
        hb.get_item(-1)


@pytest.mark.parametrize("slot", [-1, 8])
def test_put_out_of_range_raises_and_leaves_slots_untouched(slot):
    hb = Hotbar()
    with pytest.raises(SlotOutOfRangeError):
        hb.put_item_into_slot(weapon(0, "Excalibur"), slot)
    assert hb.items() == []


def test_remove_all_items_clears_every_slot():
    hb = Hotbar()
    for slot in range(hb.get_num_slots()):
        hb.put_item_into_slot(weapon(slot, f"Blade {slot}"), slot)
    hb.remove_all_items()
    assert hb.slots() == (None,) * 8
    assert hb.get_num_slots() == 8


def test_capacity_never_changes_across_operations():
    hb = Hotbar()
    hb.put_item_into_slot(ring(1, "Ring"), 5)
    hb.pack()
    hb.sort_by_item_type()
    hb.remove_all_items()
    assert hb.get_num_slots() == 8
    assert len(hb.slots()) == 8


def test_dump_lists_every_slot_and_ends_with_blank_line():
    hb = Hotbar()
    hb.put_item_into_slot(weapon(0, "Excalibur"), 1)
    text = hb.dump()
    lines = text.split("\n")
    assert lines[0] == "    Hotbar {"
    assert lines[1] == "        Slot 0 - NULL"
    assert lines[2] == "        Slot 1 - Excalibur [Weapon] - Id 0"
    assert lines[9] == "    }"
    assert text.endswith("    }\n\n")


def test_dump_uses_configured_empty_marker():
    hb = Hotbar(num_slots=2, empty_marker="<empty>")
    assert "Slot 1 - <empty>" in hb.dump()

import threading

from mpower.engine.builder import InvoiceBuilder
from mpower.engine.snapshot import InvoiceSnapshotter, prepare_for_request


def test_positional_keys_follow_current_order():
    b = InvoiceBuilder()
    for name in ["A", "B", "C"]:
        b.add_item(name, 1, 1, 1, "")
    prepare_for_request(b)
    assert {k: v.name for k, v in b.transmission_items.items()} == {
        "item_0": "A", "item_1": "B", "item_2": "C",
    }

    b.remove_item("B")
    prepare_for_request(b)
    assert {k: v.name for k, v in b.transmission_items.items()} == {
        "item_0": "A", "item_1": "C",
    }


def test_prepare_is_idempotent():
    b = InvoiceBuilder()
    b.add_item("A", 1, 1, 1, "")
    b.add_tax("VAT", 3)
    snap = InvoiceSnapshotter()
    snap.prepare_for_request(b)
    first = (b.transmission_items, b.transmission_taxes)
    snap.prepare_for_request(b)
    assert (b.transmission_items, b.transmission_taxes) == first


def test_no_stale_entries_survive():
    b = InvoiceBuilder()
    b.add_tax("VAT", 1)
    b.add_tax("NHIL", 2)
    prepare_for_request(b)
    b.remove_tax("NHIL")
    prepare_for_request(b)
    assert list(b.transmission_taxes) == ["tax_0"]


def test_clear_all_items_then_prepare_is_empty():
    b = InvoiceBuilder()
    b.add_item("A", 1, 1, 1, "")
    prepare_for_request(b)
    b.clear_all_items()
    assert b.items == ()
    prepare_for_request(b)
    assert b.transmission_items == {}


def test_transmission_is_lazy():
    b = InvoiceBuilder()
    b.add_item("A", 1, 1, 1, "")
    assert b.transmission_items == {}


def test_concurrent_custom_data_writes():
    b = InvoiceBuilder()
    barrier = threading.Barrier(2)

    def writer(prefix):
        barrier.wait()
        for i in range(200):
            b.set_custom_data(f"{prefix}_{i}", i)
            if i % 50 == 0:
                prepare_for_request(b)

    threads = [threading.Thread(target=writer, args=(p,)) for p in ("left", "right")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    data = b.custom_data
    assert len(data) == 400
    assert data["left_199"] == 199
    assert data["right_0"] == 0

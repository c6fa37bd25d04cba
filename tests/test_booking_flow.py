"""Integration tests: controller + store + ledger + file storage together."""

import json

from consignment_booking.form.controller import BookingFormController
from consignment_booking.form.state_machine import FormState
from consignment_booking.storage.booking_store import BookingErrorCode, BookingStore
from consignment_booking.storage.local_storage import JsonFileStorage
from tests.conftest import MONDAY, fill_controller


class TestFullDayScenario:
    """Empty store, book the whole day, then try one more item."""

    def test_full_day_then_rejection(self, controller, store, storage):
        fill_controller(controller, date_str="2024-06-10", items=80)
        result = controller.submit()
        assert result["success"]
        assert store.totals["2024-06-10"] == 80

        full = [o for o in controller.date_options() if o["value"] == "2024-06-10"]
        assert full[0]["disabled"]

        controller.start_new_booking()
        snapshot = storage.get_item("bookings")
        fill_controller(controller, date_str="2024-06-10", items=1)
        result = controller.submit()
        assert not result["success"]
        assert result["error_code"] == BookingErrorCode.CAPACITY_EXCEEDED
        assert storage.get_item("bookings") == snapshot
        assert controller.state == FormState.EDITING

    def test_second_session_sees_full_day(self, controller, storage):
        fill_controller(controller, date_str="2024-06-10", items=80)
        controller.submit()

        second = BookingFormController(BookingStore(storage), today=lambda: MONDAY)
        fill_controller(second, date_str="2024-06-10", items=1)
        assert second.submit()["error_code"] == BookingErrorCode.CAPACITY_EXCEEDED


class TestPersistenceAcrossSessions:
    def test_booking_survives_reload(self, tmp_path):
        path = tmp_path / "bookings.json"
        controller = BookingFormController(BookingStore(JsonFileStorage(path)), today=lambda: MONDAY)
        fill_controller(controller, items=20)
        booking = controller.submit()["booking"]

        reloaded = BookingStore(JsonFileStorage(path))
        assert reloaded.get(booking.id) == booking
        assert reloaded.totals == {"2024-06-10": 20}

    def test_cancel_survives_reload(self, tmp_path):
        path = tmp_path / "bookings.json"
        controller = BookingFormController(BookingStore(JsonFileStorage(path)), today=lambda: MONDAY)
        fill_controller(controller, items=20)
        controller.submit()
        controller.cancel()

        assert BookingStore(JsonFileStorage(path)).bookings == []
        stored = json.loads(path.read_text())
        assert json.loads(stored["bookings"]) == []

    def test_corrupt_file_starts_empty_and_recovers(self, tmp_path):
        path = tmp_path / "bookings.json"
        path.write_text("{corrupt")
        store = BookingStore(JsonFileStorage(path))
        assert store.bookings == []

        controller = BookingFormController(store, today=lambda: MONDAY)
        fill_controller(controller, items=5)
        assert controller.submit()["success"]
        assert len(BookingStore(JsonFileStorage(path)).bookings) == 1

from datetime import datetime, time

from timecast.db.repositories import WorkShiftRepository


def test_repository_crud_round_trip_normalizes_times(db):
    repo = WorkShiftRepository(db)

    shift = repo.create(name="night", start_time="10 pm", end_time="2024-01-02 06:00:00")
    db.commit()

    loaded = repo.get(shift.id)
    assert loaded is not None
    assert loaded.start_time == "22:00:00"
    assert loaded.end_time == "06:00:00"

    repo.update(loaded, end_time=time(7, 15))
    db.commit()
    assert repo.get(shift.id).end_time == "07:15:00"

    assert [item.name for item in repo.list()] == ["night"]

    repo.delete(loaded)
    db.commit()
    assert repo.get(shift.id) is None


def test_list_starting_between_accepts_any_time_form(db):
    repo = WorkShiftRepository(db)
    repo.create(name="early", start_time="05:00")
    repo.create(name="morning", start_time="8:30 am")
    repo.create(name="noon", start_time=datetime(2024, 5, 1, 12, 0))
    repo.create(name="evening", start_time="18:00:00")
    db.commit()

    shifts = repo.list_starting_between("7 am", time(12, 0))

    assert [shift.name for shift in shifts] == ["morning", "noon"]

from datetime import datetime, timedelta

from face_attendance.session import MarkOutcome


def test_mark_on_empty_ledger_appends_record(make_session, ledger_path):
    session = make_session()

    assert session.mark('Alice') is MarkOutcome.MARKED

    assert ledger_path.read_text() == 'Alice,2025-08-20,Wed\n'
    assert session.list_today() == ['Alice']


def test_existing_record_is_already_marked(make_session, ledger_path):
    ledger_path.write_text('Bob,2025-08-20,Wed\n')
    session = make_session()

    assert session.list_today() == ['Bob']
    assert session.mark('Bob') is MarkOutcome.ALREADY_MARKED
    assert ledger_path.read_text() == 'Bob,2025-08-20,Wed\n'


def test_load_today_ignores_other_dates(make_session, ledger_path):
    ledger_path.write_text('Bob,2025-08-19,Tue\nCarol,2025-08-20,Wed\n')

    assert make_session().load_today() == {'Carol'}


def test_mark_is_idempotent_within_a_day(make_session, ledger_path, mono_clock):
    session = make_session(cooldown_seconds=0)

    assert session.mark('Alice') is MarkOutcome.MARKED
    mono_clock.advance(60)
    assert session.mark('Alice') is MarkOutcome.ALREADY_MARKED

    assert ledger_path.read_text().count('Alice') == 1


def test_second_mark_within_cooldown_is_noop(make_session, mono_clock):
    session = make_session(cooldown_seconds=10)

    assert session.mark('Alice') is MarkOutcome.MARKED
    mono_clock.advance(5)
    assert session.mark('Alice') is MarkOutcome.COOLDOWN
    mono_clock.advance(5)
    assert session.mark('Alice') is MarkOutcome.ALREADY_MARKED


def test_cooldown_restarts_on_every_accepted_attempt(make_session, mono_clock):
    session = make_session(cooldown_seconds=10)
    session.mark('Alice')

    mono_clock.advance(10)
    assert session.mark('Alice') is MarkOutcome.ALREADY_MARKED
    mono_clock.advance(9)
    assert session.mark('Alice') is MarkOutcome.COOLDOWN


def test_cooldown_is_per_name(make_session):
    session = make_session(cooldown_seconds=10)

    assert session.mark('Alice') is MarkOutcome.MARKED
    assert session.mark('Bob') is MarkOutcome.MARKED


def test_cooldown_holds_across_midnight(make_session, wall_clock, mono_clock, ledger_path):
    wall_clock.value = datetime(2025, 8, 20, 23, 59, 58)
    session = make_session(cooldown_seconds=10)
    assert session.mark('Alice') is MarkOutcome.MARKED

    wall_clock.value += timedelta(seconds=5)
    mono_clock.advance(5)

    assert session.mark('Alice') is MarkOutcome.COOLDOWN
    assert ledger_path.read_text() == 'Alice,2025-08-20,Wed\n'


def test_date_rollover_starts_a_new_day(make_session, wall_clock, mono_clock, ledger_path):
    session = make_session(cooldown_seconds=10)
    session.mark('Alice')

    wall_clock.value += timedelta(days=1)
    mono_clock.advance(3600)

    assert session.today() == '2025-08-21'
    assert session.list_today() == []
    assert session.mark('Alice') is MarkOutcome.MARKED
    assert ledger_path.read_text() == (
        'Alice,2025-08-20,Wed\n'
        'Alice,2025-08-21,Thu\n'
    )


def test_unpadded_dates(make_session, wall_clock, ledger_path):
    wall_clock.value = datetime(2025, 8, 5, 8, 0)
    session = make_session(zero_pad_dates=False)

    session.mark('Alice')

    assert session.today() == '2025-8-5'
    assert ledger_path.read_text() == 'Alice,2025-8-5,Tue\n'


def test_unpadded_session_does_not_see_padded_records(make_session, wall_clock, ledger_path):
    wall_clock.value = datetime(2025, 8, 5, 8, 0)
    ledger_path.write_text('Alice,2025-08-05,Tue\n')

    assert make_session(zero_pad_dates=False).list_today() == []


def test_is_marked(make_session):
    session = make_session()
    session.mark('Alice')

    assert session.is_marked('Alice')
    assert not session.is_marked('Bob')

from schedbot.validator import ScheduleValidator, schedule_validator


def test_valid_entry():
    result = schedule_validator.validate("makan", "19-10-2026", "12:00")
    assert result.valid
    assert result.errors == []


def test_rejects_impossible_dates():
    assert not schedule_validator.is_valid_date("32-01-2026")
    assert not schedule_validator.is_valid_date("01-13-2026")
    assert not schedule_validator.is_valid_date("29-02-2027")
    assert schedule_validator.is_valid_date("29-02-2028")


def test_rejects_bad_times():
    assert not schedule_validator.is_valid_time("10:60")
    assert not schedule_validator.is_valid_time("24:00")
    assert not schedule_validator.is_valid_time("10.00")
    assert schedule_validator.is_valid_time("9:05")
    assert schedule_validator.is_valid_time("23:59")


def test_reports_every_failed_field():
    result = schedule_validator.validate("a", "31-02-2026", "25:00")
    assert not result.valid
    assert result.errors == [
        "Aktivitas terlalu pendek atau kosong",
        "Format tanggal tidak valid",
        "Format waktu tidak valid",
    ]


def test_missing_fields():
    result = schedule_validator.validate(None, None, None)
    assert len(result.errors) == 3


def test_sanitize_and_length():
    validator = ScheduleValidator(max_message_length=5)
    assert validator.sanitize_input("  hi\x00 ") == "hi"
    assert validator.sanitize_input(None) == ""
    assert validator.is_too_long("123456")
    assert not validator.is_too_long("12345")

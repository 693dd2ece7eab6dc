from datetime import datetime

from schedbot.nlp.dates import normalize_relative_date, normalize_time
from schedbot.nlp.extractor import (
    ExportFormat,
    detect_export_format,
    extract_activity,
    extract_date_pattern,
    extract_reminder_minutes,
    extract_time_pattern,
    extract_time_phrase,
    format_window,
    looks_like_date,
    looks_like_time,
    reflect_pronouns,
)

NOW = datetime(2026, 10, 19, 13, 0)


def test_extract_activity_strips_verb_time_and_period():
    assert extract_activity("Tambah makan siang jam 12") == "makan"
    assert extract_activity("Jadwalkan nonton malam ini jam 7") == "nonton"
    assert extract_activity("Tambah rapat besok jam 9 pagi") == "rapat"


def test_extract_activity_strips_dates():
    assert extract_activity("buat jadwal rapat tanggal 12 november pukul 10") == "rapat"
    assert extract_activity("tambah senam hari jumat jam 6 pagi") == "senam"
    assert extract_activity("tambah servis motor 10/11 jam 8") == "servis motor"


def test_extract_activity_keeps_multiword_labels():
    assert extract_activity("tambah rapat divisi keuangan besok jam 9") == "rapat divisi keuangan"


def test_extract_activity_bare_verb():
    assert extract_activity("tambah") == ""
    assert extract_activity("") == ""
    assert extract_activity("tambah besok jam 9") == ""


def test_extract_date_pattern_precedence():
    assert extract_date_pattern("rapat besok jam 9") == "besok"
    assert extract_date_pattern("rapat minggu depan") == "minggu depan"
    assert extract_date_pattern("rapat tanggal 12 november") == "tanggal 12 november"
    assert extract_date_pattern("rapat 10/11 jam 8") == "10/11"
    assert extract_date_pattern("rapat 12 desember 2027") == "12 desember 2027"
    assert extract_date_pattern("senam jumat pagi") == "jumat"
    assert extract_date_pattern("makan") == "hari ini"


def test_extract_date_pattern_ignores_space_separated_time():
    assert extract_date_pattern("makan jam 7 30") == "hari ini"


def test_extract_time_pattern():
    assert extract_time_pattern("rapat besok jam 9 pagi") == "jam 9 pagi"
    assert extract_time_pattern("rapat pukul 10.30") == "pukul 10.30"
    assert extract_time_pattern("rapat besok") == ""


def test_extract_time_phrase_borrows_period_word():
    phrase = extract_time_phrase("Jadwalkan nonton malam ini jam 7")
    assert phrase == "jam 7 malam"
    assert normalize_time(phrase) == "19:00"


def test_extract_time_phrase_without_anchor_skips_dates():
    assert normalize_time(extract_time_phrase("tambah servis 10/11 19.30")) == "19:30"


def test_date_and_time_shapes():
    assert looks_like_time("10:00")
    assert looks_like_time("jam 8")
    assert not looks_like_time("besok")
    assert looks_like_date("besok")
    assert looks_like_date("hari senin")
    assert looks_like_date("tanggal 5")
    assert not looks_like_date("sarapan")


def test_edit_value_resolves_with_relative_dates():
    assert normalize_relative_date("minggu depan", NOW) == "26-10-2026"


def test_extract_reminder_minutes():
    assert extract_reminder_minutes("reminder 45 menit", 60) == 45
    assert extract_reminder_minutes("reminder satu jam", 60) == 60
    assert extract_reminder_minutes("ingatkan dua hari ke depan", 60) == 2880
    assert extract_reminder_minutes("reminder nanti", 60) == 60


def test_format_window():
    assert format_window(30) == "30 menit"
    assert format_window(90) == "1 jam"
    assert format_window(1440) == "1 hari"


def test_detect_export_format():
    assert detect_export_format("export text") is ExportFormat.TEXT
    assert detect_export_format("export pdf") is ExportFormat.TEXT
    assert detect_export_format("export csv") is ExportFormat.CSV
    assert detect_export_format("backup jadwal") is ExportFormat.BACKUP
    assert detect_export_format("export") is ExportFormat.ALL


def test_reflect_pronouns_single_pass():
    assert reflect_pronouns("Saya mau terbang") == "Kamu mau terbang"
    assert reflect_pronouns("kamu dan saya") == "saya dan kamu"
    assert reflect_pronouns("gue bosen") == "lu bosen"
    assert reflect_pronouns("") == ""


def test_pada_anchors_a_time_but_not_a_date():
    assert extract_activity("tambah rapat pada 10/11") == "rapat"
    assert extract_activity("tambah rapat pada 10 november jam 9") == "rapat"
    assert extract_activity("tambah makan pada 8 malam") == "makan"
    assert extract_time_pattern("makan pada 8 malam") == "pada 8 malam"
    assert extract_time_pattern("rapat pada 10 november") == ""


def test_tanggal_with_month_and_year():
    assert extract_date_pattern("rapat tanggal 10 november 2027") == "tanggal 10 november 2027"
    assert extract_activity("tambah rapat tanggal 10 november 2027") == "rapat"
    assert normalize_time(extract_time_phrase("tambah rapat tanggal 10 november 2027")) == "00:00"
    assert normalize_relative_date("tanggal 10 november 2027", NOW) == "10-11-2027"

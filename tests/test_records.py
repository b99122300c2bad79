from roster.records import has_header, is_blank, load_records, row_to_record


HEADER = "م,اسم الدارس,الجنسية,تاريخ الميلاد,الجوال"


def test_has_header_markers():
    assert has_header(["م", "الاسم"])
    assert has_header(["رقم", "اسم الدارس"])
    assert has_header(["1", "بيانات الدارس"])
    assert not has_header(["1", "أحمد", "مصري"])


def test_exact_marker_must_be_whole_cell():
    # "م" appears inside most Arabic names; only a bare "م" cell counts
    assert not has_header(["1", "محمد"])


def test_data_row_with_marker_is_treated_as_header():
    assert has_header(["1", "اسماء"])


def test_is_blank():
    assert is_blank(["", "", ""])
    assert is_blank([])
    assert not is_blank(["", "x"])


def test_row_to_record_pads_and_truncates():
    short = row_to_record(["7", "أحمد"])
    assert short.id == "7" and short.name == "أحمد" and short.completion == ""

    long = row_to_record([str(i) for i in range(25)])
    assert long.national_id == "12"
    assert long.completion == "19"


def test_load_records_sniffs_header_and_skips_blank_rows():
    text = HEADER + "\n1,أحمد,مصري,2000-01-01,050\n,,,,\n2,سارة,سعودية,,051\n"
    records, report = load_records(text)
    assert [r.name for r in records] == ["أحمد", "سارة"]
    assert records[1].phone == "051"
    assert report == {"records": 2, "header": True, "header_sniffed": True, "blank_rows_skipped": 1}


def test_load_records_without_header():
    records, report = load_records("1,أحمد\n2,سارة")
    assert len(records) == 2
    assert report["header"] is False


def test_explicit_header_flag_overrides_sniffing():
    records, report = load_records("1,اسماء\n2,سارة", header=False)
    assert [r.name for r in records] == ["اسماء", "سارة"]
    assert report["header_sniffed"] is False

    records, _ = load_records("id,name\n1,Ali", header=True)
    assert [r.name for r in records] == ["Ali"]


def test_load_records_empty():
    assert load_records("") == ([], {"records": 0, "header": False, "header_sniffed": True, "blank_rows_skipped": 0})

from schedbot.nlp.numerals import NUMBER_WORDS, expand_number_words


def test_expand_compound_phrase():
    assert expand_number_words("satu jam dua puluh menit") == "1 jam 20 menit"


def test_expand_teens_and_tens():
    assert expand_number_words("sebelas") == "11"
    assert expand_number_words("tiga belas hari") == "13 hari"
    assert expand_number_words("lima puluh sembilan menit") == "59 menit"
    assert expand_number_words("enam puluh") == "60"


def test_expand_leaves_no_number_words():
    result = expand_number_words("reminder empat puluh lima menit dan dua jam")
    assert result == "reminder 45 menit dan 2 jam"
    for word in ("empat", "puluh", "lima", "dua"):
        assert word not in result


def test_expand_is_case_insensitive_and_tolerates_extra_spaces():
    assert expand_number_words("Dua  Puluh menit") == "20 menit"


def test_expand_does_not_touch_words_containing_numbers():
    assert expand_number_words("duapuluh rapat satuan") == "duapuluh rapat satuan"


def test_expand_empty():
    assert expand_number_words("") == ""
    assert expand_number_words(None) == ""


def test_number_words_table():
    assert NUMBER_WORDS["sepuluh"] == "10"
    assert NUMBER_WORDS["dua puluh satu"] == "21"
    assert "enam puluh satu" not in NUMBER_WORDS

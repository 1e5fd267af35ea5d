from boincview.colorstring import MAX_PART_LENGTH, ColorString, ColorStringPart


def test_constructor_formats_first_part():
    cs = ColorString(7, " Host %s:%s ", "localhost", "31416")
    assert cs.parts == [ColorStringPart(7, " Host localhost:31416 ")]


def test_empty_constructor_has_no_parts():
    assert ColorString().parts == []
    assert ColorString().length() == 0


def test_empty_format_makes_one_empty_part():
    cs = ColorString(0, "")
    assert len(cs) == 1
    assert cs.text() == ""


def test_append_and_text():
    cs = ColorString(1, "%s ", "12:00")
    cs.append(2, "%s", "proj")
    assert cs.text() == "12:00 proj"
    assert [p.attr for p in cs] == [1, 2]


def test_percent_escape():
    cs = ColorString(0, "   done%%")
    assert cs.text() == "   done%"


def test_length_in_characters():
    cs = ColorString(0, "привет")
    cs.append(1, "ab")
    assert cs.length() == len("привет") + len("ab")
    assert cs.length() == sum(p.length() for p in cs.parts)


def test_part_length_is_capped():
    cs = ColorString(0, "%s", "x" * 5000)
    assert len(cs.parts[0].text) == MAX_PART_LENGTH


def test_equality_compares_parts():
    a = ColorString(1, "abc")
    b = ColorString(1, "abc")
    assert a == b
    assert not (a != b)
    b.append(1, "d")
    assert a != b
    assert ColorString(1, "abc") != ColorString(2, "abc")


def test_copy_is_independent():
    a = ColorString(3, "one")
    b = a.copy()
    assert a == b
    b.append(3, "two")
    a.parts[0].text = "changed"
    assert b.parts[0].text == "one"
    assert len(a) == 1


def test_clear():
    cs = ColorString(1, "abc")
    cs.append(2, "def")
    cs.clear()
    assert cs.parts == []
    assert cs == ColorString()
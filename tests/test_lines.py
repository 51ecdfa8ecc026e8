from statfmt.report.formatters.lines import txt_merge_lines


def test_html5():
    assert txt_merge_lines("hello", "world") == "hello<br>\nworld"


def test_xhtml():
    assert txt_merge_lines("hello", "world", html=True) == "hello<br />\nworld"


def test_latex():
    assert txt_merge_lines("hello", "world", html=False) == (
        "\\vbox{\\hbox{\\strut hello}\\hbox{\\strut world}}"
    )


def test_lists_are_flattened():
    assert txt_merge_lines("hello", "world", ["A list", "is OK"]) == (
        "hello<br>\nworld<br>\nA list<br>\nis OK"
    )


def test_empty():
    assert txt_merge_lines() == ""


def test_single_line():
    assert txt_merge_lines("alone") == "alone"
    assert txt_merge_lines("alone", html=False) == "alone"


def test_single_string_with_newlines():
    assert txt_merge_lines("a\nb") == "a<br>\nb"
    assert txt_merge_lines("a\nb", html=False) == "\\vbox{\\hbox{\\strut a}\\hbox{\\strut b}}"


def test_non_string_lines():
    assert txt_merge_lines(1, 2.5) == "1<br>\n2.5"

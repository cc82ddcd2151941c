import pytest

from jsonnetcore.fodder import (
    FodderElement,
    FodderKind,
    count_newlines,
    element_count_newlines,
    ensure_clean_newline,
    fodder_append,
    fodder_concat,
    fodder_move_front,
    has_clean_endline,
    make_fodder_element,
)


def line_end(blanks=0, indent=0, comment=None):
    return make_fodder_element(FodderKind.LINE_END, blanks, indent, comment or [])


def interstitial(text="/* c */"):
    return make_fodder_element(FodderKind.INTERSTITIAL, 0, 0, [text])


def paragraph(lines, blanks=0, indent=0):
    return make_fodder_element(FodderKind.PARAGRAPH, blanks, indent, lines)


@pytest.mark.parametrize(
    "kind, blanks, indent, comment",
    [
        (FodderKind.LINE_END, 0, 0, ["a", "b"]),
        (FodderKind.INTERSTITIAL, 1, 0, ["/* x */"]),
        (FodderKind.INTERSTITIAL, 0, 2, ["/* x */"]),
        (FodderKind.INTERSTITIAL, 0, 0, []),
        (FodderKind.PARAGRAPH, 0, 0, []),
    ],
)
def test_make_fodder_element_rejects_bad_input(kind, blanks, indent, comment):
    with pytest.raises(ValueError):
        make_fodder_element(kind, blanks, indent, comment)


def test_make_fodder_element_keeps_fields():
    elem = make_fodder_element(FodderKind.PARAGRAPH, 2, 4, ["// hi"])
    assert elem == FodderElement(FodderKind.PARAGRAPH, 2, 4, ["// hi"])


def test_has_clean_endline():
    assert has_clean_endline([]) is False
    assert has_clean_endline([interstitial()]) is False
    assert has_clean_endline([line_end()]) is True
    assert has_clean_endline([interstitial(), paragraph(["// x"])]) is True


def test_append_merges_line_ends():
    first = line_end(blanks=1, indent=2)
    second = line_end(blanks=2, indent=4)
    fodder = [first]
    fodder_append(fodder, second)
    assert len(fodder) == 1
    assert fodder[0].kind == FodderKind.LINE_END
    assert fodder[0].indent == second.indent
    assert fodder[0].blanks == first.blanks + second.blanks
    # The original element is not changed behind the caller's back.
    assert first.blanks == 1


def test_append_line_end_with_comment_becomes_paragraph():
    fodder = [line_end()]
    fodder_append(fodder, line_end(blanks=1, indent=3, comment=["// note"]))
    assert [e.kind for e in fodder] == [FodderKind.LINE_END, FodderKind.PARAGRAPH]
    assert fodder[1].comment == ["// note"]
    assert fodder[1].indent == 3


def test_append_paragraph_after_interstitial_inserts_line_end():
    para = paragraph(["// p"], indent=6)
    fodder = [interstitial()]
    fodder_append(fodder, para)
    assert [e.kind for e in fodder] == [
        FodderKind.INTERSTITIAL,
        FodderKind.LINE_END,
        FodderKind.PARAGRAPH,
    ]
    assert fodder[1].indent == para.indent
    assert fodder[2] is para


def test_concat_with_empty_sides():
    b = [line_end(indent=2)]
    assert fodder_concat([], b) == b
    assert fodder_concat(b, []) == b


def test_concat_does_not_mutate_inputs():
    a = [line_end(blanks=1)]
    b = [line_end(blanks=1), interstitial()]
    result = fodder_concat(a, b)
    assert len(a) == 1 and a[0].blanks == 1
    assert len(b) == 2
    assert len(result) == 2
    assert result[-1] == b[-1]


def test_move_front():
    a = [interstitial("/* a */")]
    b = [interstitial("/* b */")]
    fodder_move_front(a, b)
    assert b == []
    assert [e.comment[0] for e in a] == ["/* b */", "/* a */"]


def test_ensure_clean_newline():
    fodder = [interstitial()]
    ensure_clean_newline(fodder)
    assert has_clean_endline(fodder)
    assert fodder[-1] == line_end()

    clean = [line_end(indent=4)]
    ensure_clean_newline(clean)
    assert clean == [line_end(indent=4)]


def test_element_count_newlines():
    assert element_count_newlines(interstitial()) == 0
    assert element_count_newlines(line_end()) == 1
    para = paragraph(["// a", "// b"], blanks=3)
    assert element_count_newlines(para) == len(para.comment) + para.blanks


def test_count_newlines_is_sum_of_elements():
    fodder = [line_end(), interstitial(), paragraph(["// a"], blanks=2)]
    assert count_newlines(fodder) == sum(element_count_newlines(e) for e in fodder)
    assert count_newlines([]) == 0
"""Fodder: whitespace and comments kept around tokens for round-tripping."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum


class FodderKind(IntEnum):
    """The kind of a fodder element."""

    LINE_END = 0
    INTERSTITIAL = 1
    PARAGRAPH = 2


@dataclass
class FodderElement:
    """A single piece of fodder."""

    kind: FodderKind
    blanks: int = 0
    indent: int = 0
    comment: list[str] = field(default_factory=list)


def make_fodder_element(
    kind: FodderKind, blanks: int, indent: int, comment: list[str]
) -> FodderElement:
    """Build a fodder element, rejecting combinations that make no sense."""
    if kind == FodderKind.LINE_END and len(comment) > 1:
        raise ValueError(f"FodderLineEnd but comment == {comment}.")
    if kind == FodderKind.INTERSTITIAL:
        if blanks > 0:
            raise ValueError(f"FodderInterstitial but blanks == {blanks}")
        if indent > 0:
            raise ValueError(f"FodderInterstitial but indent == {indent}")
        if len(comment) != 1:
            raise ValueError(f"FodderInterstitial but comment == {comment}.")
    if kind == FodderKind.PARAGRAPH and not comment:
        raise ValueError("FodderParagraph but comment was empty")
    return FodderElement(kind=kind, blanks=blanks, indent=indent, comment=list(comment))


def has_clean_endline(fodder: list[FodderElement]) -> bool:
    """True if the fodder is non-empty and does not end with an interstitial."""
    return bool(fodder) and fodder[-1].kind != FodderKind.INTERSTITIAL


def fodder_append(fodder: list[FodderElement], elem: FodderElement) -> None:
    """Append ``elem`` to ``fodder`` in place, keeping the fodder well formed."""
    if has_clean_endline(fodder) and elem.kind == FodderKind.LINE_END:
        if elem.comment:
            fodder.append(
                make_fodder_element(
                    FodderKind.PARAGRAPH, elem.blanks, elem.indent, elem.comment
                )
            )
        else:
            back = fodder[-1]
            fodder[-1] = replace(
                back, indent=elem.indent, blanks=back.blanks + elem.blanks
            )
        return
    if not has_clean_endline(fodder) and elem.kind == FodderKind.PARAGRAPH:
        fodder.append(make_fodder_element(FodderKind.LINE_END, 0, elem.indent, []))
    fodder.append(elem)


def fodder_concat(
    a: list[FodderElement], b: list[FodderElement]
) -> list[FodderElement]:
    """A new fodder made of ``a`` followed by ``b``.

    A line end never follows a paragraph or another line end in the result.
    """
    if not a:
        return list(b)
    if not b:
        return list(a)
    result = list(a)
    fodder_append(result, b[0])
    result.extend(b[1:])
    return result


def fodder_move_front(a: list[FodderElement], b: list[FodderElement]) -> None:
    """Move the contents of ``b`` to the front of ``a``, leaving ``b`` empty."""
    a[:] = fodder_concat(b, a)
    b.clear()


def ensure_clean_newline(fodder: list[FodderElement]) -> None:
    """Append a line end if the fodder does not already end cleanly."""
    if not has_clean_endline(fodder):
        fodder_append(fodder, make_fodder_element(FodderKind.LINE_END, 0, 0, []))


def element_count_newlines(elem: FodderElement) -> int:
    """The number of newline characters one element stands for."""
    if elem.kind == FodderKind.INTERSTITIAL:
        return 0
    if elem.kind == FodderKind.LINE_END:
        return 1
    if elem.kind == FodderKind.PARAGRAPH:
        return len(elem.comment) + elem.blanks
    raise ValueError(f"Unknown FodderElement kind {elem.kind}")


def count_newlines(fodder: list[FodderElement]) -> int:
    """The number of newline characters the whole fodder stands for."""
    return sum(element_count_newlines(elem) for elem in fodder)
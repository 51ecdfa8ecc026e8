# statfmt/report/formatters/lines.py
"""
Multi-line cell text for html and LaTeX tables.

In html a line break is just ``<br>``; LaTeX table cells need a
``\\vbox`` of ``\\hbox`` lines instead.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Union


def _flatten(items: Iterable[Any]) -> Iterator[Any]:
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


def txt_merge_lines(*lines: Any, html: Union[bool, int] = 5) -> str:
    """
    Merge lines into one cell text, keeping the line breaks.

    Args:
        *lines: Strings (or lists/tuples of strings) to put on separate lines
        html: 5 for html5 ``<br>``, any other truthy value for the xhtml
            ``<br />``, False for LaTeX ``\\vbox``/``\\hbox`` output

    Returns:
        The merged text

    Examples:
        >>> txt_merge_lines("hello", "world")
        'hello<br>\\nworld'
        >>> txt_merge_lines("hello", "world", html=True)
        'hello<br />\\nworld'
        >>> txt_merge_lines("hello", "world", html=False)
        '\\\\vbox{\\\\hbox{\\\\strut hello}\\\\hbox{\\\\strut world}}'
        >>> txt_merge_lines("hello", ["A list", "is OK"])
        'hello<br>\\nA list<br>\\nis OK'
    """
    strings: List[str] = [str(s) for s in _flatten(lines)]
    if not strings:
        return ""
    if len(strings) == 1:
        strings = strings[0].split("\n")
        if len(strings) == 1:
            return strings[0]

    if html:
        br = "<br>" if html == 5 else "<br />"
        return f"{br}\n".join(strings)

    return "\\vbox{" + "".join(f"\\hbox{{\\strut {s}}}" for s in strings) + "}"

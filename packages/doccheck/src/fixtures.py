"""Golden documentation bodies for the ``doxygen_basic_translate`` module.

Each entry pairs a member signature with the exact inner XML the translator
must emit for it. Bodies are spelled line by line because trailing spaces
are significant.
"""

from __future__ import annotations

from .registry import FixtureRegistry

MODULE = "doxygen_basic_translate"

_INDENT = " " * 12
_TAIL = "\n        "


def _body(*lines: str) -> str:
    """Join lines the way the translator lays out a member body."""
    return "\n" + "\n".join(lines) + _TAIL


DOXYGEN_BASIC_TRANSLATE: tuple[tuple[str, str], ...] = (
    (
        f"M:{MODULE}.function",
        _body(
            _INDENT + "<summary>",
            _INDENT + " ",
            _INDENT + "Brief description. ",
            _INDENT + " ",
            _INDENT + "The comment text.",
            _INDENT + "</summary> ",
            _INDENT + "<author>Some author</author> ",
            _INDENT + "<returns>Some number</returns> ",
            _INDENT + f'<seealso cref="M:{MODULE}.function2" />',
        ),
    ),
    (
        f"M:{MODULE}.function2",
        _body(
            _INDENT + "<summary>",
            _INDENT + "A test of a very very very very very very very very very very very very very very very very ",
            _INDENT + "very very very very very long comment string.",
            _INDENT + "</summary>",
        ),
    ),
    (
        f"M:{MODULE}.function3(System.Int32)",
        _body(
            _INDENT + "<summary>",
            _INDENT + "A test for overloaded functions ",
            _INDENT + "This is function <b>one</b>",
            _INDENT + "</summary>",
        ),
    ),
    (
        f"M:{MODULE}.function3(System.Int32,System.Int32)",
        _body(
            _INDENT + "<summary>",
            _INDENT + "A test for overloaded functions ",
            _INDENT + "This is function <b>two</b>",
            _INDENT + "</summary>",
        ),
    ),
    (
        f"M:{MODULE}.function4",
        _body(
            _INDENT + "<summary>",
            _INDENT + "A test of some mixed tag usage",
            _INDENT + "</summary>",
        ),
    ),
    (
        f"M:{MODULE}.function5(System.Int32)",
        _body(
            _INDENT + "<summary>",
            _INDENT + " This is a post comment. ",
            _INDENT + "</summary>",
        ),
    ),
    (
        f"M:{MODULE}.function6(System.Int32)",
        _body(
            _INDENT + "<summary>",
            _INDENT + "Test for default args",
            _INDENT + "</summary> ",
            _INDENT + '<param name="a"> Some parameter, default is 42</param>',
        ),
    ),
    (
        f"M:{MODULE}.function6",
        _body(
            _INDENT + "<summary>",
            _INDENT + "Test for default args",
            _INDENT + "</summary>",
        ),
    ),
    (
        f"M:{MODULE}.function7(SWIGTYPE_p_p_p_Shape)",
        _body(
            _INDENT + "<summary>",
            _INDENT + "Test for a parameter with difficult type ",
            _INDENT + "(mostly for python)",
            _INDENT + "</summary> ",
            _INDENT + '<param name="a"> Very strange param</param>',
        ),
    ),
    (
        f"M:{MODULE}.Atan2(System.Double,System.Double)",
        _body(
            _INDENT + "<summary>",
            _INDENT + "    Multiple parameters test. ",
            _INDENT + " ",
            _INDENT + "    ",
            _INDENT + '</summary><param name="y"> Vertical coordinate. ',
            _INDENT + '    </param><param name="x"> Horizontal coordinate. ',
            _INDENT + "    </param><returns>Arc tangent of <code>y/x</code>.</returns>",
        ),
    ),
    (
        f"M:{MODULE}.function8",
        _body(
            _INDENT + "<summary>",
            _INDENT + "Test variadic function",
            _INDENT + "</summary>",
        ),
    ),
    (
        f"M:{MODULE}.function9(System.Int32)",
        _body(
            _INDENT + "<summary>",
            _INDENT + "Test unnamed argument",
            _INDENT + "</summary>",
        ),
    ),
)


def default_registry() -> FixtureRegistry:
    """Build a fresh registry from the embedded table."""
    return FixtureRegistry.from_pairs(DOXYGEN_BASIC_TRANSLATE)

"""
structops.markup - a tiny HTML tag builder
==========================================

    p = tag("p")
    p("Hello")                          → '<p>Hello</p>'
    p()                                 → '<p/>'
    p[".note"]("Hello")                 → '<p class="note">Hello</p>'
    tag("div")["#main wide"](["a", "b"])  → '<div id="main" class="wide">ab</div>'
    tag("a")({"href": "/", 1: "home"})  → '<a href="/">home</a>'

WHAT A TAG RENDERS
──────────────────

    None            →  self-closing tag
    list / tuple    →  children; nested lists are flattened, then joined
    mapping         →  string keys are attributes, the values under the
                       integer keys 1..n are the children
    anything else   →  str(data) as the only child

An attribute whose value is True is written bare (<td nowrap>); None and
False attributes are left out.  Content is NOT escaped; use html_escape().
"""

import json
from typing import Any, Mapping, Optional, Sequence

from . import sequence
from .core import is_mapping, is_sequence, sequence_part


# ═══════════════════════════════════════════════════════════════════
#  TAGS
# ═══════════════════════════════════════════════════════════════════

_ESCAPES = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&#039;",
    '"': "&quot;",
})


def html_escape(content: str) -> str:
    """
    Replace <, >, &, ' and " with their HTML entities.

        html_escape('a < b && "x"') == 'a &lt; b &amp;&amp; &quot;x&quot;'
    """
    return content.translate(_ESCAPES)


def _ident_attributes(ident: Optional[str]) -> str:
    if not ident:
        return ""
    ids = ""
    classes = []
    for item in ident.split():
        if item.startswith("#"):
            ids += f' id="{item[1:]}"'
        elif item.startswith("."):
            classes.append(item[1:])
        else:
            classes.append(item)
    if classes:
        ids += f' class="{" ".join(classes)}"'
    return ids


def _attribute(name: str, value: Any) -> str:
    if value is True:
        return f" {name}"
    return f' {name}="{value}"'


def render(name: str, data: Any = None, ident: Optional[str] = None) -> str:
    """Render one element; see the module docstring for what data may be."""
    opening = name + _ident_attributes(ident)
    if data is None:
        return f"<{opening}/>"

    if is_mapping(data):
        opening += "".join(
            _attribute(k, v) for k, v in data.items()
            if isinstance(k, str) and v is not None and v is not False
        )
        children = sequence_part(data)
    elif is_sequence(data):
        children = data
    else:
        return f"<{opening}>{data}</{name}>"

    return f"<{opening}>{sequence.join(sequence.flatten(children))}</{name}>"


class Tag:
    """
    A renderer for one element name.

    Call it with the element's data to get markup; index it with an
    identifier string ("#id .class other") to get a renderer that also
    writes id and class attributes.
    """
    __slots__ = ("name", "ident")

    def __init__(self, name: str, ident: Optional[str] = None):
        self.name = name
        self.ident = ident

    def __call__(self, data: Any = None) -> str:
        return render(self.name, data, self.ident)

    def __getitem__(self, ident: Optional[str]) -> "Tag":
        return Tag(self.name, ident)

    def __repr__(self) -> str:
        if self.ident:
            return f"Tag({self.name!r}, {self.ident!r})"
        return f"Tag({self.name!r})"


def tag(name: str) -> Tag:
    return Tag(name)


# ═══════════════════════════════════════════════════════════════════
#  TABLES, FORMS, LINKS
# ═══════════════════════════════════════════════════════════════════

def make_tr(row: Sequence, head: bool = False, id: Optional[str] = None) -> str:
    """
    One table row, each item of row in its own cell.

        make_tr(["one", "two"]) == "<tr><td>one</td><td>two</td></tr>"
        make_tr(["one", "two"], True) == "<tr><th>one</th><th>two</th></tr>"
        make_tr(["one"], False, "select") == '<tr id="select"><td>one</td></tr>'
    """
    cell = tag("th") if head else tag("td")
    ident = f"#{id}" if id else None
    return tag("tr")[ident](sequence.map(cell, row))


def htable(rows: Sequence, attrs: Optional[Mapping[str, Any]] = None) -> str:
    """
    An HTML table.  rows holds either ready-made row strings or lists of
    cell values; attrs are extra attributes of the <table> element.

        htable([["one", "two"]], {"bgcolor": "blue"})
            == '<table bgcolor="blue"><tr><td>one</td><td>two</td></tr></table>'
    """
    data: dict = dict(attrs or {})
    for i, row in enumerate(rows, 1):
        data[i] = make_tr(row) if is_sequence(row) else row
    return tag("table")(data)


def hinput(
    type: str,
    name: Optional[str] = None,
    value: Any = None,
    attrs: Optional[Mapping[str, Any]] = None,
) -> str:
    """
        hinput("submit", None, "Submit") == '<input type="submit" value="Submit"></input>'
    """
    data = dict(attrs or {})
    data["type"] = type
    data["value"] = value
    data["name"] = name
    return tag("input")(data)


def href(url: str, name: Optional[str] = None, attrs: Optional[Mapping[str, Any]] = None) -> str:
    """
    A link to url, showing name (or the url itself).

        href("http://example.org", "Example", {"class": "selected"})
            == '<a href="http://example.org" class="selected">Example</a>'
    """
    data: dict = {"href": url}
    data.update(attrs or {})
    data[1] = name or url
    return tag("a")(data)


def item_link(url: str, name: Optional[str] = None, attrs: Optional[Mapping[str, Any]] = None) -> str:
    return tag("li")(href(url, name, attrs))


def txt_input(id: str, label: str, maxlen: Optional[int] = None) -> str:
    return tag("p")([
        tag("label")({"for": id, 1: f"{label}:"}),
        tag("input")[f"#{id}"]({"name": id, "type": "text", "maxlength": maxlen}),
    ])


def text(label: str, name: str, value: Any = None) -> tuple[str, str]:
    """A (label, text input) pair."""
    return tag("label")({"for": name, 1: label}), hinput("text", name, value)


def submit(value: str) -> str:
    return hinput("submit", "submit", value)


# ═══════════════════════════════════════════════════════════════════
#  LISTS AND PAGES
# ═══════════════════════════════════════════════════════════════════

def mklist(title: str, items: Sequence, list_tag: Tag) -> str:
    """title followed by list_tag wrapping one <li> per item."""
    entries = "".join(tag("li")(str(item)) for item in items)
    return title + list_tag([entries])


def ulist(title: str, items: Sequence) -> str:
    return mklist(title, items, tag("ul"))


def olist(title: str, items: Sequence) -> str:
    return mklist(title, items, tag("ol"))


def html_page(title: str, css_links: Sequence[str], js_links: Sequence[str], body: Any) -> str:
    stylesheet = lambda url: tag("link")({"href": url, "rel": "stylesheet", "type": "text/css"})
    script = lambda url: tag("script")({"src": url, "type": "text/javascript"})
    return tag("html")([
        tag("head")([
            tag("title")(title),
            sequence.map(stylesheet, css_links),
            sequence.map(script, js_links),
        ]),
        body,
    ])


def wrap(inner: Any) -> str:
    return tag("html")([tag("head")(), tag("body")(inner)])


def meta_data(payload: Any) -> str:
    """A <script type="application/json"> element carrying payload."""
    return tag("script")({"type": "application/json", 1: json.dumps(payload)})

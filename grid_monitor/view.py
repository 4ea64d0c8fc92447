"""Declarative view tree.

The overlay does not create widgets. It returns a tree of immutable
:class:`VNode` values that a front end (the Streamlit app, a test, a web
renderer) turns into real UI elements. Nodes are addressed with CSS-like
selectors, e.g. ``"div#overlay"`` or ``"div.box"``.

Because nodes are frozen and their data is a persistent map, two renders of
the same inputs compare equal, which makes redundant redraws harmless and
easy to detect.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from pyrsistent import PMap, freeze, pmap


@dataclass(frozen=True)
class VNode:
    """A view node.

    Attributes:
        sel: Selector ``tag[#id][.class...]``.
        data: Node properties (``props``, ``style``, ...).
        children: Child nodes and text, in order.
    """

    sel: str
    data: PMap[str, Any] = pmap()
    children: Tuple["Child", ...] = ()

    @property
    def tag(self) -> str:
        return _split_selector(self.sel)[0]

    @property
    def id(self) -> Optional[str]:
        return _split_selector(self.sel)[1]

    @property
    def classes(self) -> Tuple[str, ...]:
        return _split_selector(self.sel)[2]

    @property
    def props(self) -> PMap[str, Any]:
        return self.data.get("props", pmap())

    @property
    def style(self) -> PMap[str, Any]:
        return self.data.get("style", pmap())

    @property
    def text(self) -> str:
        """Concatenated text of the direct text children."""
        return "".join(c for c in self.children if isinstance(c, str))


Child = Union[VNode, str]


def h(
    sel: str,
    data: Optional[Mapping[str, Any]] = None,
    children: Union[str, Iterable[Child], None] = None,
) -> VNode:
    """Build a :class:`VNode`.

    ``data`` may be omitted: ``h("p", "text")`` and ``h("div", [child])`` are
    accepted like their three-argument forms.
    """
    if children is None and (isinstance(data, str) or _is_children(data)):
        data, children = None, data  # type: ignore[assignment]
    if children is None:
        kids: Tuple[Child, ...] = ()
    elif isinstance(children, str):
        kids = (children,)
    else:
        kids = tuple(children)
    return VNode(sel=sel, data=freeze(dict(data or {})), children=kids)


def walk(node: VNode) -> Iterator[VNode]:
    """Depth-first pre-order iteration over ``node`` and its descendants."""
    yield node
    for child in node.children:
        if isinstance(child, VNode):
            yield from walk(child)


def find_all(node: VNode, sel: str) -> Tuple[VNode, ...]:
    """All nodes below (and including) ``node`` whose selector equals ``sel``."""
    return tuple(n for n in walk(node) if n.sel == sel)


def _is_children(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _split_selector(sel: str) -> Tuple[str, Optional[str], Tuple[str, ...]]:
    head, *classes = sel.split(".")
    tag, _, ident = head.partition("#")
    return tag, ident or None, tuple(classes)

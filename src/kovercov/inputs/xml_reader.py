from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from defusedxml import DefusedXmlException, ElementTree

from kovercov.errors import MalformedReportError

if TYPE_CHECKING:
    from collections.abc import Iterator


class ElementLike(Protocol):
    """The part of ``ElementTree.Element`` the Kover reader walks."""

    tag: str

    def get(self, key: str, default: str | None = None) -> str | None: ...

    def iter(self, tag: str | None = None) -> Iterator[ElementLike]: ...

    def __iter__(self) -> Iterator[ElementLike]: ...


def local_name(tag: str | None) -> str:
    """Return *tag* without its ``{namespace}`` prefix."""
    return (tag or "").split("}")[-1]


def read_root(content: bytes, *, source: object = "<memory>") -> ElementLike:
    """Parse Kover XML and return the root element.

    Kover and JaCoCo reports both use ``<report>`` as root. A default namespace
    is accepted; callers match elements by :func:`local_name`.
    """
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as exc:
        msg = f"failed to parse Kover XML {source}: {exc}"
        raise MalformedReportError(msg) from exc
    except DefusedXmlException as exc:
        msg = f"refusing unsafe XML construct in {source}: {exc}"
        raise MalformedReportError(msg) from exc

    if local_name(root.tag).lower() != "report":
        msg = f"unexpected root tag {root.tag!r} in {source}"
        raise MalformedReportError(msg)
    return root


__all__ = ["ElementLike", "local_name", "read_root"]

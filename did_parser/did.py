"""DID URL data model."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .const import (
    DID_SCHEME,
    FRAGMENT_START,
    PARAM_ASSIGN,
    PARAM_SEP,
    PATH_SEP,
    QUERY_ASSIGN,
    QUERY_SEP,
    QUERY_START,
)

Params = Mapping[str, Optional[str]]


def _format_pair(name: str, value: Optional[str], assign: str) -> str:
    return name if value is None else f"{name}{assign}{value}"


def _freeze_map(values: Optional[Mapping]) -> Optional[Params]:
    if values is None or isinstance(values, MappingProxyType):
        return values
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class Did:
    """A parsed DID or DID URL as defined by Decentralized Identifiers 1.0.

    Components which did not appear in the input are `None`. All values keep
    their percent-encoding.
    """

    method: str
    id: str
    method_params: Optional[Params] = None
    path: Optional[Sequence[str]] = None
    query: Optional[Params] = None
    frag: Optional[str] = None
    components: tuple[str, ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self):
        """Make the container fields read-only."""
        object.__setattr__(self, "method_params", _freeze_map(self.method_params))
        object.__setattr__(self, "query", _freeze_map(self.query))
        if self.path is not None:
            object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "components", tuple(self.components))

    @property
    def did(self) -> str:
        """Access the base DID for this DID URL."""
        return f"{DID_SCHEME}{self.method}:{self.id}"

    @property
    def root(self) -> "Did":
        """Access this DID without any parameters, path, query or fragment."""
        return Did(method=self.method, id=self.id)

    @property
    def is_base(self) -> bool:
        """Check whether this is a plain DID with no DID URL components."""
        return (
            self.method_params is None
            and self.path is None
            and self.query is None
            and self.frag is None
        )

    @property
    def url(self) -> str:
        """Access the DID URL text.

        For a parsed value this is exactly the input. A value constructed
        directly is formatted from its fields.
        """
        return self.did + "".join(self.components or self._format_components())

    def _format_components(self) -> tuple[str, ...]:
        parts = []
        if self.method_params is not None:
            parts.append(
                "".join(
                    PARAM_SEP + _format_pair(k, v, PARAM_ASSIGN)
                    for k, v in self.method_params.items()
                )
            )
        if self.path is not None:
            parts.append("".join(PATH_SEP + seg for seg in self.path))
        if self.query is not None:
            parts.append(
                QUERY_START
                + QUERY_SEP.join(_format_pair(k, v, QUERY_ASSIGN) for k, v in self.query.items())
            )
        if self.frag is not None:
            parts.append(FRAGMENT_START + self.frag)
        return tuple(parts)

    def serialize(self) -> dict:
        return {
            "method": self.method,
            "id": self.id,
            "methodParams": (
                dict(self.method_params) if self.method_params is not None else None
            ),
            "path": list(self.path) if self.path is not None else None,
            "query": dict(self.query) if self.query is not None else None,
            "fragment": self.frag,
        }

"""Header, query and form parameters attached to a request."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


def _merged(left: Optional[Dict[str, str]], right: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
    if left is None and right is None:
        return None
    return {**(left or {}), **(right or {})}


class Parameters(BaseModel):
    """Optional headers, query and form parameters of a request.

    Instances are immutable; the ``with_*`` builders return a new copy.

    Examples:
        >>> p = Parameters().with_query({"page": "2"}).with_headers({"X-Trace": "abc"})
        >>> p.query
        {'page': '2'}
        >>> p.form is None
        True
    """

    model_config = ConfigDict(frozen=True)

    headers: Optional[Dict[str, str]] = None
    query: Optional[Dict[str, str]] = None
    form: Optional[Dict[str, str]] = None

    def with_headers(self, headers: Dict[str, str]) -> Parameters:
        return self.model_copy(update={"headers": dict(headers)})

    def with_query(self, query: Dict[str, str]) -> Parameters:
        return self.model_copy(update={"query": dict(query)})

    def with_form(self, form: Dict[str, str]) -> Parameters:
        return self.model_copy(update={"form": dict(form)})

    def merge(self, other: Parameters) -> Parameters:
        """Combine two parameter sets; values from ``other`` win on key collisions."""
        return Parameters(
            headers=_merged(self.headers, other.headers),
            query=_merged(self.query, other.query),
            form=_merged(self.form, other.form),
        )

    def is_empty(self) -> bool:
        return self.headers is None and self.query is None and self.form is None

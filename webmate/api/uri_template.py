"""
URI Template
Endpoint paths with ${name} placeholders, resolved against path parameters
"""

import re
from string import Template
from typing import FrozenSet, Mapping

from webmate.api.exceptions import UriTemplateError

_PLACEHOLDER = re.compile(r'\$\{([_a-zA-Z][_a-zA-Z0-9]*)\}')


class UriTemplate:
    """
    Path template with ${name} placeholders, e.g. "/projects/${projectId}/artifacts".

    Templates are immutable and hold no per-call state, so one instance can be
    shared by every request that targets the same endpoint.
    """

    __slots__ = ('_template', '_placeholders')

    def __init__(self, template: str):
        object.__setattr__(self, '_template', template)
        object.__setattr__(self, '_placeholders', frozenset(_PLACEHOLDER.findall(template)))

    def __setattr__(self, key, value):
        raise AttributeError("UriTemplate is immutable")

    @property
    def template(self) -> str:
        return self._template

    @property
    def placeholders(self) -> FrozenSet[str]:
        return self._placeholders

    def resolve(self, params: Mapping[str, str]) -> str:
        """
        Substitute every placeholder with its value from params

        Args:
            params: Mapping from placeholder name to value

        Returns:
            str: The concrete path

        Raises:
            UriTemplateError: If a placeholder has no value in params
        """
        missing = self._placeholders - set(params)
        if missing:
            raise UriTemplateError(
                f"Cannot resolve '{self._template}': missing value for {', '.join(sorted(missing))}"
            )
        return Template(self._template).substitute({name: str(params[name]) for name in self._placeholders})

    def __eq__(self, other):
        return isinstance(other, UriTemplate) and self._template == other._template

    def __hash__(self):
        return hash(self._template)

    def __repr__(self):
        return f"UriTemplate({self._template!r})"

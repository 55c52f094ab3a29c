"""Named placeholder substitution.

Placeholders use a colon prefix: ``"Hello :name!"`` with ``{"name": "John"}``
becomes ``"Hello John!"``. Custom replacers may override the text used for
any parameter.
"""

from typing import Any, Callable, Dict, List, Mapping

from locale_master.i18n.models import ParameterValue, to_display_string

# (parameter name, parameter value, all parameters) -> replacement.
# Returning ":<name>" defers to the default rendering.
Replacer = Callable[[str, ParameterValue, Mapping[str, Any]], str]


def placeholder(name: str) -> str:
    return f":{name}"


class ParameterReplacer:
    """Substitutes ``:name`` placeholders using a parameter map.

    Replacers run in registration order over every parameter; when several
    replacers produce a value for the same parameter, the last one wins.
    Parameters are substituted longest name first so ``:name`` never eats
    the beginning of ``:name_full``.
    """

    def __init__(self):
        self._replacers: List[Replacer] = []

    def add_replacer(self, replacer: Replacer) -> None:
        """Register a custom replacer. No deduplication is performed."""
        self._replacers.append(replacer)

    @property
    def replacers(self) -> List[Replacer]:
        return list(self._replacers)

    def substitute(self, template: str, parameters: Mapping[str, ParameterValue]) -> str:
        """Replace every ``:name`` occurrence in template.

        Parameters without a placeholder are ignored; placeholders without a
        parameter stay in the output untouched.

        Args:
            template: Raw message.
            parameters: Parameter name -> value.

        Returns:
            Message with placeholders substituted.
        """
        custom: Dict[str, str] = {}
        for replacer in self._replacers:
            for name, value in parameters.items():
                replacement = replacer(name, value, parameters)
                if replacement != placeholder(name):
                    custom[name] = replacement

        result = template
        for name in sorted(parameters, key=len, reverse=True):
            if name in custom:
                replacement = custom[name]
            else:
                replacement = to_display_string(parameters[name])
            result = result.replace(placeholder(name), replacement)

        return result

"""Template handler contract and the generic parameter-extraction handlers."""

from dataclasses import dataclass
from functools import partial
from typing import Callable, FrozenSet, Optional

from ..models import Template

Transform = Callable[[Template], Optional[str]]


@dataclass(frozen=True)
class TemplateHandler:
    """Pairs the template names a rule supports with its transform function.

    Handlers are immutable and hold no per-call state, so one instance can
    be shared by every caller.
    """
    names: FrozenSet[str]
    transform: Transform

    def handle(self, template: Template) -> Optional[str]:
        """Render ``template``, or return ``None`` if it is not ours or is declined."""
        if template is None or template.name not in self.names:
            return None
        return self.transform(template)


def handler(*names: str) -> Callable[[Transform], TemplateHandler]:
    """Decorator turning a transform function into a :class:`TemplateHandler`."""
    def wrap(transform: Transform) -> TemplateHandler:
        return TemplateHandler(frozenset(names), transform)
    return wrap


def _numbered_param(template: Template, param_index: int,
                    prefix: str, suffix: str) -> Optional[str]:
    param = template.get_numbered_param(param_index)
    if param is None:
        return None
    return prefix + param + suffix


def _param_list(template: Template, start_index: int,
                prefix: str, suffix: str) -> Optional[str]:
    joined = ", ".join(param for param in template.numbered_params[start_index:] if param)
    if not joined:
        return None
    return prefix + joined + suffix


def numbered_param_handler(*names: str, param_index: int = 0,
                           prefix: str = "", suffix: str = "") -> TemplateHandler:
    """Replace the template with one positional parameter, wrapped in prefix/suffix.

    Used for templates such as ``{{gloss}}``.  Declines when the parameter
    is missing.
    """
    return TemplateHandler(
        frozenset(names),
        partial(_numbered_param, param_index=param_index, prefix=prefix, suffix=suffix),
    )


def list_handler(*names: str, start_index: int = 0,
                 prefix: str = "", suffix: str = "") -> TemplateHandler:
    """Replace the template with its positional parameters from ``start_index`` on.

    Parameters are comma separated and wrapped in prefix/suffix.  Declines
    when nothing would end up between the prefix and suffix.
    """
    return TemplateHandler(
        frozenset(names),
        partial(_param_list, start_index=start_index, prefix=prefix, suffix=suffix),
    )

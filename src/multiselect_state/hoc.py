"""with_multi_select_state: attach MultiSelectState to a presentational callable.

The wrapped component is any callable taking keyword props, e.g. a function
building a panel layout or a plain test double. It receives the host's own
props unchanged plus the controller's derived lists and mutators.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .state import MultiSelectState

logger = logging.getLogger(__name__)

# Props consumed by the controller rather than passed through.
_STATE_PROPS = ("items", "selected_items", "on_change")


class MultiSelectHost:
    """A wrapped component instance: controller plus pass-through props."""

    component: Callable[..., Any]

    def __init__(self, **props: Any) -> None:
        state_props, self._extra = _split_props(props)
        self._selected_source: tuple[Any, Any] = (None, None)
        self.state = MultiSelectState(**self._as_lists(state_props))

    @property
    def props(self) -> dict[str, Any]:
        """Props the component would be rendered with right now."""
        return {**self._extra, **self.state.props()}

    def prop(self, name: str) -> Any:
        return self.props[name]

    def set_props(self, **props: Any) -> None:
        """Apply new props from the parent, as on a re-render."""
        state_props, extra = _split_props(props)
        self._extra.update(extra)
        if state_props:
            logger.debug("set_props: %s", sorted(state_props))
            self.state.param.update(**self._as_lists(state_props))

    def _as_lists(self, state_props: dict[str, Any]) -> dict[str, Any]:
        """Turn tuples and other sequences into the lists the state expects.

        A converted ``selected_items`` is cached against its source object so
        passing the same sequence again still reaches the state as the same
        list and does not resync.
        """
        items = state_props.get("items")
        if items is not None and not isinstance(items, list):
            state_props["items"] = list(items)
        selected = state_props.get("selected_items")
        if selected is not None and not isinstance(selected, list):
            source, converted = self._selected_source
            if source is not selected:
                converted = list(selected)
                self._selected_source = (selected, converted)
            state_props["selected_items"] = converted
        return state_props

    def render(self) -> Any:
        return self.component(**self.props)

    def __repr__(self) -> str:
        name = getattr(self.component, "__name__", repr(self.component))
        return f"{type(self).__name__}({name}, {self.state!r})"


def _split_props(props: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    state_props = {k: v for k, v in props.items() if k in _STATE_PROPS}
    extra = {k: v for k, v in props.items() if k not in _STATE_PROPS}
    return state_props, extra


def with_multi_select_state(
    component: Callable[..., Any],
) -> type[MultiSelectHost]:
    """Return a host class that renders ``component`` with selection state.

    Example
    -------
    >>> Picker = with_multi_select_state(render_picker)
    >>> picker = Picker(items=items, on_change=print)
    >>> picker.prop("select_all_items")()
    """
    name = getattr(component, "__name__", "Component")
    return type(
        f"WithMultiSelectState_{name}",
        (MultiSelectHost,),
        {"component": staticmethod(component)},
    )

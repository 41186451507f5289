"""Host event hooks - callbacks the platform fires on its own events."""

from collections import defaultdict
from collections.abc import Callable

from loguru import logger

DELETE_FORM = "delete_form"

Hook = Callable[[dict], None]


class HookRegistry:
    """Event name -> callbacks, fired in registration order."""

    def __init__(self):
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    def register(self, event: str, hook: Hook) -> None:
        self._hooks[event].append(hook)
        logger.debug("Hook registered: {} -> {}", event, getattr(hook, "__qualname__", hook))

    def fire(self, event: str, info: dict) -> int:
        """Call every hook registered for event. Hook errors propagate."""
        hooks = self._hooks.get(event, [])
        for hook in hooks:
            hook(info)
        return len(hooks)

"""
Host-side model tying configuration, command registry and actions together.

The surrounding application drives a ``ChatBot`` once per tick: call
``update`` with the elapsed time, then ``handle_message`` for every pending
chat message, and send whatever replies come back.
"""

from pathlib import Path
from typing import List, Optional, Union

from ..commands import Action, AuthorityLevel, CommandCall, CommandRegistry, ReloadConfig, Say
from ..config import ChatmandsConfig, ConfigLoader, ConfigurationError
from ..utils.error_handling import handle_configuration_operation
from ..utils.logging import get_logger


class ChatBot:
    """Owns the command registry and executes the actions it produces."""

    def __init__(
        self,
        config: Optional[ChatmandsConfig] = None,
        config_path: Optional[Union[str, Path]] = None,
        loader: Optional[ConfigLoader] = None,
    ):
        self.logger = get_logger(__name__)
        self.config_path = Path(config_path) if config_path else None
        self.loader = loader or ConfigLoader()
        self.config = config or self.loader.load_config(self.config_path)
        self.registry = CommandRegistry(self.config.commands)

    def update(self, delta_time: float) -> None:
        """Advance cooldowns. Call once per tick, even when nothing arrived."""
        self.registry.update(delta_time)

    def handle_message(self, message: str, authority: AuthorityLevel = AuthorityLevel.VIEWER) -> List[str]:
        """Dispatch one chat message and return the replies to send."""
        call = CommandCall(message=message, authority=authority)
        replies = []
        for action in self.registry.dispatch(call):
            replies.extend(self.execute(action))
        return replies

    def execute(self, action: Action) -> List[str]:
        """Carry out ``action``; returns chat replies it produced."""
        self.logger.debug(f"Executing action: {action!r}")
        if isinstance(action, Say):
            return [action.message]
        if isinstance(action, ReloadConfig):
            try:
                self.reload()
            except ConfigurationError as e:
                self.logger.error(f"Keeping previous commands, reload failed: {e}")
            return []
        raise TypeError(f"Unsupported action: {action!r}")

    @handle_configuration_operation("reload")
    def reload(self) -> ChatmandsConfig:
        """Re-read the configuration file and rebuild the configured commands."""
        config = self.loader.reload_config(self.config_path)
        self.config = config
        self.registry.reload(config.commands)
        return config

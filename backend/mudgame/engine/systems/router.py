"""
CommandRouter: Decorator-based command routing for the text front end.

Provides:
- @register() decorator for handler registration
- Unified command dispatch with alias support
- Availability rules evaluated against current game state
- Command metadata and help
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine import Simulation

logger = logging.getLogger(__name__)

# Type alias for event
Event = Dict[str, Any]
CommandHandler = Callable[..., List[Event]]  # (engine, args)
Availability = Callable[["Simulation"], bool]


@dataclass
class CommandMeta:
    """Metadata for a registered command."""
    name: str  # Primary command name
    names: List[str]  # All primary names
    aliases: List[str]  # Short forms
    handler: CommandHandler  # The actual handler function
    category: str  # Command category (actions, info, ...)
    description: str  # Human-readable description
    usage: str = ""  # Usage string (e.g., "attack")
    requires: Optional[Availability] = None  # None means always available

    def is_available(self, engine: "Simulation") -> bool:
        return self.requires is None or self.requires(engine)


class CommandRouter:
    """
    Routes typed commands to handlers.

    Which commands are enabled is decided by polling the engine on every
    dispatch, the same way buttons would be enabled or disabled.
    """

    def __init__(self, engine: "Simulation") -> None:
        self.engine = engine
        self.commands: Dict[str, CommandMeta] = {}  # name or alias -> meta
        self.categories: Dict[str, List[str]] = {}  # category -> [primary names]

    def register(
        self,
        names: List[str],
        aliases: Optional[List[str]] = None,
        category: str = "misc",
        description: str = "",
        usage: str = "",
        requires: Optional[Availability] = None,
    ) -> Callable:
        """
        Decorator to register a command handler.

        Usage:
            @router.register(names=["attack", "kill"], aliases=["a"], requires=can_attack)
            def handle_attack(engine, args):
                ...
        """
        def decorator(handler: CommandHandler) -> CommandHandler:
            self.register_handler(
                handler,
                names=names,
                aliases=aliases,
                category=category,
                description=description,
                usage=usage,
                requires=requires,
            )
            return handler

        return decorator

    def register_handler(
        self,
        handler: CommandHandler,
        names: List[str],
        aliases: Optional[List[str]] = None,
        category: str = "misc",
        description: str = "",
        usage: str = "",
        requires: Optional[Availability] = None,
    ) -> None:
        """Register a command handler directly (without decorator)."""
        meta = CommandMeta(
            name=names[0],
            names=list(names),
            aliases=list(aliases or []),
            handler=handler,
            category=category,
            description=description,
            usage=usage,
            requires=requires,
        )
        for name in meta.names + meta.aliases:
            self.commands[name] = meta

        primaries = self.categories.setdefault(category, [])
        if meta.name not in primaries:
            primaries.append(meta.name)

    def is_available(self, name: str) -> bool:
        meta = self.commands.get(name.lower())
        return meta is not None and meta.is_available(self.engine)

    def available_commands(self) -> List[str]:
        """Primary names of every command that can run right now."""
        seen: List[str] = []
        for meta in self.commands.values():
            if meta.name not in seen and meta.is_available(self.engine):
                seen.append(meta.name)
        return seen

    def dispatch(self, raw_command: str) -> List[Event]:
        """
        Parse and dispatch a command to its handler.

        Returns:
            List of events for the presentation layer
        """
        raw = raw_command.strip()
        if not raw:
            return []

        parts = raw.split(maxsplit=1)
        cmd_name = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        ctx = self.engine.ctx
        meta = self.commands.get(cmd_name)
        if meta is None:
            return [ctx.msg_to_player(
                ctx.player_id,
                f"Unknown command '{cmd_name}'. Type 'help' for a list of commands."
            )]

        if not meta.is_available(self.engine):
            return [ctx.msg_to_player(ctx.player_id, f"You can't {meta.name} right now.")]

        try:
            return meta.handler(self.engine, args)
        except Exception:
            logger.exception("Command %r failed", cmd_name)
            return [ctx.msg_to_player(ctx.player_id, "Something went wrong executing that command.")]

    def get_help(self) -> str:
        """Help text listing every command and whether it is enabled now."""
        lines = ["═══ Available Commands ═══", ""]

        for cat in sorted(self.categories):
            lines.append(f"{cat.title()}:")
            for cmd_name in self.categories[cat]:
                meta = self.commands[cmd_name]
                usage = f"{cmd_name} {meta.usage}" if meta.usage else cmd_name
                extra = meta.names[1:] + meta.aliases
                aliases_str = f" (aliases: {', '.join(extra)})" if extra else ""
                state = "" if meta.is_available(self.engine) else " [disabled]"
                lines.append(f"  {usage}{aliases_str}{state}")
                if meta.description:
                    lines.append(f"    {meta.description}")
            lines.append("")

        return "\n".join(lines).rstrip()

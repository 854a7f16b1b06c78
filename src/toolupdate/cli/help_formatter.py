"""Custom Click help formatter for organized command display."""

import click

_SECTIONS = (
    ("Updates", ("run",)),
    ("Registry", ("list", "ls", "register", "unregister")),
    ("Setup", ("info", "config")),
)


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    Commands not named in any section are listed under "Other".
    """

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        commands: dict[str, click.Command] = {}
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands[subcommand] = cmd

        if not commands:
            return

        placed: set[str] = set()
        for title, names in _SECTIONS:
            rows = [(name, commands[name]) for name in names if name in commands]
            if rows:
                with formatter.section(title):
                    self._format_command_list(formatter, rows)
                placed.update(name for name, _ in rows)

        others = [(name, cmd) for name, cmd in commands.items() if name not in placed]
        if others:
            with formatter.section("Other"):
                self._format_command_list(formatter, others)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        rows = [(name, cmd.get_short_help_str(limit=formatter.width)) for name, cmd in commands]
        formatter.write_dl(rows)

# https://click.palletsprojects.com/en/8.1.x/complex/#defining-the-lazy-group
import importlib

import click


class LazyGroup(click.Group):
    """
    Group importing the module of a sub command only when it is run.
    Completion is executed on every tab press, so shellcomp startup has to be fast.
    Sub commands can be abbreviated to any unique prefix.
    """

    def __init__(self, *args, lazy_subcommands=None, **kwargs):
        super().__init__(*args, **kwargs)
        # lazy_subcommands is a map of the form:
        #
        #   {command-name} -> {module-name}.{command-object-name}
        #
        self.lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx):
        return sorted([*super().list_commands(ctx), *self.lazy_subcommands])

    def _lazy_load(self, cmd_name):
        modname, cmd_object_name = self.lazy_subcommands[cmd_name].rsplit(".", 1)
        cmd_object = getattr(importlib.import_module(modname), cmd_object_name)
        if not isinstance(cmd_object, click.Command):
            raise ValueError(
                f"Lazy loading of {cmd_name} from {modname} returned a non-command object"
            )
        return cmd_object

    def get_command(self, ctx, cmd_name):
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name not in self.lazy_subcommands:
            matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
            if not matches:
                return None
            if len(matches) != 1:
                ctx.fail(f"Too many matches: {', '.join(matches)}")
            cmd_name = matches[0]
            rv = super().get_command(ctx, cmd_name)
            if rv is not None:
                return rv
        return self._lazy_load(cmd_name)

    def resolve_command(self, ctx, args):
        # always return the full command name
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args

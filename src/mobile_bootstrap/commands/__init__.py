"""Commands shipped with mobile-bootstrap, in help display order."""

from mobile_bootstrap.registry import CommandRegistry


def build_registry() -> CommandRegistry:
    """Construct fresh descriptors for every shipped command."""
    from mobile_bootstrap.commands import bind, build, init, install, version

    return CommandRegistry(
        [
            bind.new_command(),
            build.new_command(),
            init.new_command(),
            install.new_command(),
            version.new_command(),
        ]
    )

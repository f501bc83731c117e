"""copyright-profiles CLI.

Manages profiles and scope assignments of the configured project without
going through the daemon.
"""

import sys
from pathlib import Path

import click

from copyright_library.config.loader import load_config
from copyright_library.models.profiles import CopyrightProfile
from copyright_library.models.scopes import ScopeDefinition
from copyright_library.services.project_service import CopyrightProject
from copyright_library.storage.paths import get_daemon_log_path


def open_project(config_path: Path | None) -> CopyrightProject:
    """Build project services from configuration.

    Args:
        config_path: Optional explicit config file

    Returns:
        CopyrightProject for the configured project
    """
    return CopyrightProject(load_config(config_path))


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: $COPYRIGHTD_HOME/config/copyrightd.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None):
    """Manage copyright profiles and their scope assignments."""
    ctx.obj = open_project(config_path)


@cli.command("list")
@click.pass_obj
def list_profiles(project: CopyrightProject):
    """List profiles and scope assignments."""
    manager = project.manager
    profiles = manager.get_copyrights()
    if not profiles:
        click.echo("No profiles")
    for profile in profiles:
        marker = " (default)" if profile.name == manager.default_copyright_name else ""
        click.echo(f"{profile.name}{marker}")

    if manager.scope_to_copyright:
        click.echo("\nScope assignments:")
        for scope_name, profile_name in manager.scope_to_copyright.items():
            click.echo(f"  {scope_name} -> {profile_name}")


@cli.command()
@click.argument("name")
@click.pass_obj
def show(project: CopyrightProject, name: str):
    """Show a profile's notice template."""
    profile = project.manager.find_copyright(name)
    if profile is None:
        click.echo(f"Profile not found: {name}", err=True)
        sys.exit(1)
    click.echo(f"Name:    {profile.name}")
    click.echo(f"Keyword: {profile.keyword}")
    if profile.allow_replace_regexp:
        click.echo(f"Replace: {profile.allow_replace_regexp}")
    click.echo("-" * 40)
    click.echo(profile.notice)


@cli.command()
@click.argument("name")
@click.option("--notice", help="Notice template text")
@click.option("--notice-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Read notice from file")
@click.option("--keyword", help="Keyword detecting an existing notice")
@click.option("--allow-replace", "allow_replace_regexp", help="Regexp of notices that may be replaced")
@click.pass_obj
def save(
    project: CopyrightProject,
    name: str,
    notice: str | None,
    notice_file: Path | None,
    keyword: str | None,
    allow_replace_regexp: str | None,
):
    """Create a profile or update an existing one."""
    if notice and notice_file:
        click.echo("Error: Cannot specify both --notice and --notice-file", err=True)
        sys.exit(1)
    if notice_file:
        notice = notice_file.read_text(encoding="utf-8").rstrip("\n")

    current = project.manager.find_copyright(name) or CopyrightProfile(name=name)
    updates = {"notice": notice, "keyword": keyword, "allow_replace_regexp": allow_replace_regexp}
    incoming = current.model_copy(update={k: v for k, v in updates.items() if v is not None})

    project.manager.replace_copyright(name, incoming)
    project.save()
    click.echo(f"Saved profile {name}")


@cli.command()
@click.argument("name")
@click.pass_obj
def remove(project: CopyrightProject, name: str):
    """Remove a profile and its scope assignments."""
    if project.manager.scheme_manager.find_scheme_by_name(name) is None:
        click.echo(f"Profile not found: {name}", err=True)
        sys.exit(1)
    project.manager.remove_copyright(CopyrightProfile(name=name))
    project.save()
    click.echo(f"Removed profile {name}")


@cli.command("map")
@click.argument("scope")
@click.argument("profile")
@click.pass_obj
def map_scope(project: CopyrightProject, scope: str, profile: str):
    """Assign PROFILE to SCOPE."""
    if project.scopes.get_predicate(scope) is None:
        click.echo(f"Warning: scope '{scope}' is not defined and will never match", err=True)
    project.manager.map_copyright(scope, profile)
    project.save()
    click.echo(f"{scope} -> {profile}")


@cli.command()
@click.argument("scope")
@click.pass_obj
def unmap(project: CopyrightProject, scope: str):
    """Remove the assignment of SCOPE."""
    project.manager.unmap_copyright(scope)
    project.save()
    click.echo(f"Unmapped {scope}")


@cli.command("set-default")
@click.argument("profile", required=False)
@click.pass_obj
def set_default(project: CopyrightProject, profile: str | None):
    """Set the default profile (omit PROFILE to clear it)."""
    manager = project.manager
    if profile is None:
        manager.default_copyright = None
        project.save()
        click.echo("Default profile cleared")
        return

    found = manager.find_copyright(profile)
    if found is None:
        click.echo(f"Profile not found: {profile}", err=True)
        sys.exit(1)
    manager.default_copyright = found
    project.save()
    click.echo(f"Default profile: {profile}")


@cli.command()
@click.argument("path")
@click.pass_obj
def resolve(project: CopyrightProject, path: str):
    """Show which profile applies to PATH."""
    profile = project.manager.get_copyright_options(project.resolve_path(path))
    click.echo(profile.name if profile is not None else "(none)")


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def apply(project: CopyrightProject, paths: tuple[str, ...]):
    """Add the applicable notice to each of PATHS."""
    failed = False
    for path in paths:
        try:
            updated = project.apply(path)
        except (OSError, ValueError) as e:
            click.echo(f"{path}: failed ({e})", err=True)
            failed = True
            continue
        click.echo(f"{path}: {'updated' if updated else 'unchanged'}")
    if failed:
        sys.exit(1)


@cli.group()
def scope():
    """Manage scope definitions."""


@scope.command("list")
@click.pass_obj
def list_scopes(project: CopyrightProject):
    """List defined scopes."""
    scopes = project.scopes.list_scopes()
    if not scopes:
        click.echo("No scopes")
    for definition in scopes:
        excluded = f" (exclude: {', '.join(definition.exclude)})" if definition.exclude else ""
        click.echo(f"{definition.name}: {', '.join(definition.include)}{excluded}")


@scope.command("define")
@click.argument("name")
@click.option("--include", "-i", multiple=True, required=True, help="Glob pattern relative to the project root")
@click.option("--exclude", "-x", multiple=True, help="Glob pattern removed from the scope")
@click.pass_obj
def define_scope(project: CopyrightProject, name: str, include: tuple[str, ...], exclude: tuple[str, ...]):
    """Define or redefine scope NAME."""
    project.scopes.define_scope(ScopeDefinition(name=name, include=list(include), exclude=list(exclude)))
    project.scopes.save()
    click.echo(f"Defined scope {name}")


@scope.command("remove")
@click.argument("name")
@click.pass_obj
def remove_scope(project: CopyrightProject, name: str):
    """Remove scope NAME (assignments to it stop matching)."""
    if not project.scopes.remove_scope(name):
        click.echo(f"Scope not found: {name}", err=True)
        sys.exit(1)
    project.scopes.save()
    click.echo(f"Removed scope {name}")


@cli.command()
@click.option("-n", "--lines", default=50, help="Number of lines to show")
def logs(lines: int):
    """Show the last lines of the daemon log."""
    log_file = get_daemon_log_path()
    if not log_file.exists():
        click.echo(f"No log file at {log_file}")
        return
    with open(log_file, encoding="utf-8") as f:
        all_lines = f.readlines()
    for line in all_lines[-lines:]:
        click.echo(line.rstrip())


@cli.command()
@click.pass_obj
def serve(project: CopyrightProject):
    """Run the copyrightd HTTP daemon."""
    from .__main__ import main as run_daemon

    project.close()
    run_daemon()


def main():
    """Entry point for copyright-profiles CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted")
        sys.exit(0)


if __name__ == "__main__":
    main()

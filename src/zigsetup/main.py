"""CLI entry point for zigsetup."""

import sys
from pathlib import Path
from typing import Annotated

import click
import typer
from py_app_dev.core.exceptions import UserNotificationException
from py_app_dev.core.logging import logger, setup_logger, time_it

from zigsetup import __version__
from zigsetup.domain import DEFAULT_INDEX_URL, DEFAULT_MACH_INDEX_URL, SetupConfig
from zigsetup.exceptions import ZigSetupError
from zigsetup.toolchain import get_zig_cache_path
from zigsetup.zigsetup import ZigSetup

package_name = "zigsetup"

app = typer.Typer(
    name=package_name,
    help="Resolve the Zig toolchain to install and derive its cache keys.",
    no_args_is_help=True,
    add_completion=False,
)

ConfigOption = Annotated[Path | None, typer.Option("-c", "--config", help="Path to a JSON setup configuration file.")]
VersionOption = Annotated[
    str | None,
    typer.Option("--version", envvar="INPUT_VERSION", help="Zig version: explicit, 'latest', 'master', a Mach name, or empty for build.zig.zon."),
]
ProjectDirOption = Annotated[Path | None, typer.Option("--project-dir", help="Directory containing build.zig.zon.")]
IndexUrlOption = Annotated[str | None, typer.Option("--index-url", help="Zig version index URL.")]
MachIndexUrlOption = Annotated[str | None, typer.Option("--mach-index-url", help="Mach nominated version index URL.")]
JobOption = Annotated[str | None, typer.Option("--job", envvar="GITHUB_JOB", help="CI job name used to namespace the cache.")]
RunnerTempOption = Annotated[str | None, typer.Option("--runner-temp", envvar="RUNNER_TEMP", help="Directory for downloaded tarballs.")]


@app.callback(invoke_without_command=True)
def version(
    version: bool = typer.Option(None, "--version", "-v", is_eager=True, help="Show version and exit."),
) -> None:
    if version:
        typer.echo(f"{package_name} {__version__}")
        raise typer.Exit()


def _from_command_line(name: str) -> bool:
    """Tell whether option *name* was typed on the command line rather than read from the environment."""
    ctx = click.get_current_context(silent=True)
    return ctx is not None and ctx.get_parameter_source(name) is click.core.ParameterSource.COMMANDLINE


def _load_config(
    config_file: Path | None,
    version: str | None,
    project_dir: Path | None,
    index_url: str | None,
    mach_index_url: str | None,
    job: str | None = None,
    runner_temp: str | None = None,
) -> SetupConfig:
    """Build the setup configuration from a config file or from the individual options."""
    if config_file:
        if any(x is not None for x in (project_dir, index_url, mach_index_url)):
            logger.error("--project-dir, --index-url and --mach-index-url cannot be used with --config.")
            raise typer.Exit(1)
        if version is not None and _from_command_line("version"):
            logger.error("--version cannot be used with --config; set it in the configuration file.")
            raise typer.Exit(1)
        try:
            config = SetupConfig.from_json_file(config_file)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load configuration {config_file}: {e}")
            raise typer.Exit(1) from e
        # environment inputs still fill in what the file leaves out
        config.version = config.version or version or ""
        config.job = config.job or job
        config.runner_temp = config.runner_temp or runner_temp
        return config
    return SetupConfig(
        version=version or "",
        project_dir=str(project_dir or Path.cwd()),
        index_url=index_url or DEFAULT_INDEX_URL,
        mach_index_url=mach_index_url or DEFAULT_MACH_INDEX_URL,
        job=job,
        runner_temp=runner_temp,
    )


@app.command(help="Print the concrete Zig version to install.")
@time_it("resolve")
def resolve(
    config_file: ConfigOption = None,
    version: VersionOption = None,
    project_dir: ProjectDirOption = None,
    index_url: IndexUrlOption = None,
    mach_index_url: MachIndexUrlOption = None,
) -> None:
    config = _load_config(config_file, version, project_dir, index_url, mach_index_url)
    try:
        typer.echo(ZigSetup(config).resolve_version())
    except ZigSetupError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


@app.command(help="Print the Zig tarball file name for this host.")
@time_it("artifact")
def artifact(
    config_file: ConfigOption = None,
    version: VersionOption = None,
    project_dir: ProjectDirOption = None,
    index_url: IndexUrlOption = None,
    mach_index_url: MachIndexUrlOption = None,
) -> None:
    config = _load_config(config_file, version, project_dir, index_url, mach_index_url)
    try:
        setup = ZigSetup(config)
        typer.echo(f"{setup.artifact_name()}{setup.extension()}")
    except ZigSetupError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


@app.command(name="cache-prefix", help="Print the build cache key prefix for this job and host.")
@time_it("cache-prefix")
def cache_prefix(
    config_file: ConfigOption = None,
    version: VersionOption = None,
    project_dir: ProjectDirOption = None,
    index_url: IndexUrlOption = None,
    mach_index_url: MachIndexUrlOption = None,
    job: JobOption = None,
) -> None:
    config = _load_config(config_file, version, project_dir, index_url, mach_index_url, job=job)
    try:
        typer.echo(ZigSetup(config).cache_prefix())
    except ZigSetupError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


@app.command(help="Print every derived value as JSON.")
@time_it("plan")
def plan(
    config_file: ConfigOption = None,
    version: VersionOption = None,
    project_dir: ProjectDirOption = None,
    index_url: IndexUrlOption = None,
    mach_index_url: MachIndexUrlOption = None,
    job: JobOption = None,
    runner_temp: RunnerTempOption = None,
) -> None:
    config = _load_config(config_file, version, project_dir, index_url, mach_index_url, job=job, runner_temp=runner_temp)
    try:
        typer.echo(ZigSetup(config).plan().to_json_string())
    except ZigSetupError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


@app.command(name="cache-dir", help="Print the global cache directory of the installed zig.")
@time_it("cache-dir")
def cache_dir(
    zig: Annotated[str, typer.Option("--zig", help="Zig executable to query.")] = "zig",
) -> None:
    try:
        typer.echo(get_zig_cache_path(zig))
    except ZigSetupError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


def main() -> int:
    try:
        setup_logger()
        app()
        return 0
    except UserNotificationException as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

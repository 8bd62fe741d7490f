"""CLI entry point for tf-installer."""

from __future__ import annotations

import click

from tf_installer.config import load_config
from tf_installer.errors import InstallError
from tf_installer.install import describe_environment, install_tensorflow
from tf_installer.models import InstallMethod, InstallRequest

METHODS = [m.value for m in InstallMethod]

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="TOML file overriding environment name, package lists and URLs.",
)
conda_option = click.option(
    "--conda",
    default="auto",
    show_default=True,
    help='Path to the conda binary, or "auto" to search for it.',
)
method_option = click.option(
    "--method",
    type=click.Choice(METHODS),
    default=InstallMethod.AUTO.value,
    show_default=True,
    help="Installation method.",
)


@click.group()
@click.version_option(package_name="tf-installer")
def cli() -> None:
    """Install TensorFlow into a conda environment, virtualenv, or system Python."""


@cli.command()
@method_option
@click.option(
    "--version",
    "version",
    default="latest",
    show_default=True,
    help='TensorFlow version: "latest" or a full major.minor.patch version.',
)
@click.option("--gpu", is_flag=True, help="Install the GPU build of TensorFlow.")
@click.option(
    "--package-url",
    default=None,
    help="URL of the TensorFlow package to install (overrides --version and --gpu).",
)
@conda_option
@config_option
def install(
    method: str,
    version: str,
    gpu: bool,
    package_url: str | None,
    conda: str,
    config_path: str | None,
) -> None:
    """Install TensorFlow and its companion packages."""
    request = InstallRequest(
        method=InstallMethod(method),
        version=version,
        gpu=gpu,
        package_url=package_url,
        conda=conda,
    )
    try:
        install_tensorflow(request, config=load_config(config_path))
    except InstallError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@method_option
@conda_option
@config_option
def info(method: str, conda: str, config_path: str | None) -> None:
    """Show detected tools and the method an install would use."""
    request = InstallRequest(method=InstallMethod(method), conda=conda)
    try:
        lines = describe_environment(request, load_config(config_path))
    except InstallError as exc:
        raise click.ClickException(str(exc)) from exc
    for line in lines:
        click.echo(line)

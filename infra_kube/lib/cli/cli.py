import logging

import click
import hiyapyco
import yaml
from dacite import DaciteError

from infra_kube.lib.kubernetes.base import HelmChartModule
from infra_kube.lib.kubernetes.helm import iter_charts
from infra_kube.lib.kubernetes.schema import ManifestError
from infra_kube.module_manager import module_manager

_provider = "kubernetes"


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def _chart_module(module_name: str, provider: str, config_files):
    """Resolve a chart module and load its config

    :return: (module class, config)
    """
    try:
        lazy_module = module_manager.get_module(provider, module_name)
        module_cls = lazy_module.Module
    except ModuleNotFoundError as e:
        raise click.BadParameter(str(e), param_hint="MODULE")

    if not issubclass(module_cls, HelmChartModule):
        raise click.BadParameter(f"module `{module_name}` does not install a chart", param_hint="MODULE")

    try:
        config = lazy_module.load_config(list(config_files))
    except (
        DaciteError,
        ValueError,
        TypeError,
        yaml.YAMLError,
        hiyapyco.HiYaPyCoInvocationException,
        hiyapyco.HiYaPyCoImplementationException,
    ) as e:
        raise click.ClickException(f"invalid config for `{module_cls.__name__}`: {e}")

    return module_cls, config


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")


@cli.command()
@click.option("--repo", help="Only list charts of this repository")
def charts(repo):
    """List the pinned charts of the catalog"""
    try:
        entries = list(iter_charts(repo))
    except KeyError as e:
        raise click.BadParameter(e.args[0], param_hint="--repo")

    for repo_name, repo_url, chart_key, info in entries:
        echo_key_value(f"{repo_name}/{chart_key}", f"{info.chart}@{info.version} ({repo_url})")


@cli.command()
@click.option("--provider", help="Only list the modules of this provider")
def modules(provider):
    """List the modules that can be used as stacks"""
    if provider is not None:
        try:
            module_manager.get_provider_modules(provider)
        except ModuleNotFoundError as e:
            raise click.BadParameter(str(e), param_hint="--provider")

    for module_provider, stack_name, lazy_module in module_manager.iter_modules():
        if provider is None or module_provider == provider:
            echo_key_value(stack_name, f"infra_kube{lazy_module.path}")


@cli.command()
@click.argument("module_name", metavar="MODULE")
@click.option(
    "-c",
    "--config",
    "config_files",
    multiple=True,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML stack config, repeat to merge several files",
)
@click.option("--provider", default=_provider, show_default=True, help="Provider the module belongs to")
def values(module_name, config_files, provider):
    """Print the validated values tree a module hands to its chart"""
    module_cls, config = _chart_module(module_name, provider, config_files)

    try:
        rendered = module_cls.validated_values(config)
    except ManifestError as e:
        raise click.ClickException(str(e))

    click.echo(yaml.safe_dump(rendered, default_flow_style=False, sort_keys=False), nl=False)


@cli.command()
@click.argument("module_name", metavar="MODULE")
@click.option(
    "-c",
    "--config",
    "config_files",
    multiple=True,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML stack config, repeat to merge several files",
)
@click.option("--provider", default=_provider, show_default=True, help="Provider the module belongs to")
def validate(module_name, config_files, provider):
    """Check a stack config and the values it renders"""
    module_cls, config = _chart_module(module_name, provider, config_files)

    try:
        module_cls.validated_values(config)
    except ManifestError as e:
        raise click.ClickException(str(e))

    echo_key_value("Module", module_cls.__name__)
    echo_key_value("Chart", f"{module_cls.chart_repo}/{module_cls.chart_key}")
    echo_key_value("Namespace", module_cls.namespace.value)
    click.echo(click.style("values are valid", fg="green"))


def run():
    exit(cli())


if __name__ == "__main__":
    run()

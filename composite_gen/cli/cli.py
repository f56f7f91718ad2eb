from datetime import date

import click
from rich import pretty
from rich.console import Console
from rich.table import Table

from composite_gen.api.gen_logging import configure_logging
from composite_gen.api.generator import generate as generate_sources
from composite_gen.errors import CompositeGenError
from composite_gen.meta.catalog import load_catalog
from composite_gen.settings import GeneratorSettings
from composite_gen.validation import validate_catalog

pretty.install()
console = Console()


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def _settings(catalog_path) -> GeneratorSettings:
    overrides = {}
    if catalog_path is not None:
        overrides["catalog_path"] = catalog_path
    return GeneratorSettings(**overrides)


def catalog_table(catalog) -> Table:
    table = Table(title=f"Resource catalog ({catalog.revision_labels})")
    table.add_column("Type", style="bold")
    table.add_column("Kind")
    table.add_column("Scope")
    table.add_column("Keys")
    table.add_column("Provider")
    table.add_column("Fields", justify="right")
    for service in catalog.services:
        if service.is_group_resource_service:
            kind = "group"
        elif service.has_crud:
            kind = "crud+update" if service.has_update else "crud"
        elif service.is_main_service:
            kind = "main"
        else:
            kind = "nested"
        keys = ", ".join(k.value for k in service.scope_class.legal_key_types) if service.has_crud else ""
        table.add_row(
            service.name,
            kind,
            service.scope_class.value if service.has_crud else "",
            keys,
            service.provider_name if service.has_crud else "",
            str(len(service.fields)),
        )
    return table


@click.group()
@click.pass_context
def cli(context):
    context.ensure_object(dict)


@cli.command("validate", help="Load the resource catalog and check its invariants.")
@click.pass_context
@click.option("--catalog", "catalog_path", type=click.Path(dir_okay=False), default=None,
              help="Catalog YAML (default: COMPOSITE_GEN_CATALOG_PATH or the packaged catalog).")
def validate(context, catalog_path):
    try:
        settings = _settings(catalog_path)
        validate_catalog(load_catalog(settings.catalog_path))
        console.print(f"{_stamp()} Catalog validation success!", style="green")
    except CompositeGenError as e:
        console.print(f"{_stamp()} Validation failed with error(s): {e}", style="red", markup=False)
        context.exit(1)
    else:
        context.exit(0)


@cli.command("inspect", help="Print a summary of the resource catalog.")
@click.pass_context
@click.option("--catalog", "catalog_path", type=click.Path(dir_okay=False), default=None,
              help="Catalog YAML (default: COMPOSITE_GEN_CATALOG_PATH or the packaged catalog).")
def inspect_cmd(context, catalog_path):
    try:
        settings = _settings(catalog_path)
        catalog = validate_catalog(load_catalog(settings.catalog_path))
        console.print(catalog_table(catalog))
    except CompositeGenError as e:
        console.print(f"{_stamp()} Inspect failed with error(s): {e}", style="red", markup=False)
        context.exit(1)
    else:
        context.exit(0)


@cli.command("generate", help="Emit the composite wrapper module and its tests.")
@click.pass_context
@click.option("--catalog", "catalog_path", type=click.Path(dir_okay=False), default=None,
              help="Catalog YAML (default: COMPOSITE_GEN_CATALOG_PATH or the packaged catalog).")
@click.option("--year", type=int, default=None, help="Year in the license header (default: current year).")
@click.option("-v", "--verbose", is_flag=True, help="Per-resource detail.")
@click.option("-q", "--quiet", is_flag=True, help="Warnings and errors only.")
def generate(context, catalog_path, year, verbose, quiet):
    configure_logging(verbose=verbose, quiet=quiet)
    try:
        settings = _settings(catalog_path)
        generate_sources(settings, year=year)
        console.print(
            f"{_stamp()} Generated {settings.wrapper_output} and {settings.test_output}",
            style="green",
        )
    except (CompositeGenError, OSError) as e:
        console.print(f"{_stamp()} Generation failed with error(s): {e}", style="red", markup=False)
        context.exit(1)
    else:
        context.exit(0)


def main():
    cli()


if __name__ == "__main__":
    main()

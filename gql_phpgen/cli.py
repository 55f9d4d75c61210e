"""Command-line interface for gql-phpgen."""

import click
import logging
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

from .core.config import PhpConfig, load_config
from .core.errors import PhpGenError
from .core.generator import PhpGenerator
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner
from .core.parser import SchemaLoader


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    if archive_path.suffix == ".zip":
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif archive_path.name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            tar_ref.extractall(temp_dir, filter="data")
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


@click.group()
@click.version_option(package_name="gql-phpgen")
def main():
    """GraphQL to PHP code generator.

    Generate PHP classes, interfaces and enums from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, or archive (.zip, .tar.gz, .tgz).",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output PHP file (must end in .php).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or JSON file with generator options (namespaceName, listType, ...).",
)
@click.option("--namespace", help="PHP namespace for the generated file.")
@click.option("--list-type", help="Collection type used for GraphQL lists.")
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option("--header", help="Comment line inserted after the <?php tag.")
@click.option("--exclude-prefix", help="Skip types whose names start with this prefix.")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    config_path: str | None,
    namespace: str | None,
    list_type: str | None,
    template_dir: str | None,
    header: str | None,
    exclude_prefix: str | None,
    verbose: bool,
):
    """Generate PHP declarations from a GraphQL schema.

    Examples:

        gql-phpgen generate --schema ./schema --output ./src/Types.php

        gql-phpgen generate -s ./schema.graphqls -o Types.php --namespace App\\\\Gql

        gql-phpgen generate -s ./schema.tgz -o Types.php -c codegen.yml
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()
    temp_dir = None

    try:
        config = load_config(config_path) if config_path else PhpConfig()
        overrides = {}
        if namespace:
            overrides["namespace_name"] = namespace
        if list_type:
            overrides["list_type"] = list_type
        if overrides:
            config = config.model_copy(update=overrides)

        hooks = HookRunner()
        if exclude_prefix:
            hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
        if header:
            hooks.add_post_hook(AddHeaderHook(header))

        # Handle archives
        actual_schema_path = schema_path
        if schema_path.is_file() and schema_path.name.lower().endswith(
            (".zip", ".tar.gz", ".tgz")
        ):
            click.echo(f"Extracting archive {schema_path.name}...")
            temp_dir = extract_archive(schema_path)
            actual_schema_path = Path(temp_dir)
            if verbose:
                click.echo(f"  Extracted to: {temp_dir}")

        if verbose:
            click.echo(f"Schema: {actual_schema_path}")
            click.echo(f"Output: {output_path}")
            click.echo(f"Namespace: {config.namespace_name}")

        click.echo("Loading schema...")
        gql_schema = SchemaLoader(str(actual_schema_path)).load()

        click.echo("Generating code...")
        generator = PhpGenerator(gql_schema, config, template_dir=template_dir, hooks=hooks)
        generator.write(output_path)

        click.echo(f"Done! Generated {output_path}")
    except (PhpGenError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    finally:
        # Clean up temp directory
        if temp_dir:
            shutil.rmtree(temp_dir)


if __name__ == "__main__":
    main()

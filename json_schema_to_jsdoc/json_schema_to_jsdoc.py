import json
import logging
from pathlib import Path

import click

from .pipeline import JSDocError, JSDocGeneratorConfig, OutputMode, PipelineGenerator, load_schema
from .pipeline.writer import AtomicWriter

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--mode",
    "-m",
    default=None,
    type=click.Choice([mode.value for mode in OutputMode]),
    help="What to do when OUTPUT exists: overwrite it (force) or fail (error)",
)
@click.option(
    "--dump-dereferenced",
    default=None,
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Also write the dereferenced schema as JSON to this path",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every visited property")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def json_schema_to_jsdoc(config, mode, dump_dereferenced, verbose, path, output):
    """Convert the JSON Schema at PATH into a JSDoc typedef module at OUTPUT."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if config is not None:
            with open(config) as f:
                config = JSDocGeneratorConfig.from_dict(json.load(f))
        else:
            config = JSDocGeneratorConfig()

        # CLI flag overrides config file
        if mode is not None:
            config.output.mode = OutputMode(mode)

        codegen = PipelineGenerator(load_schema(path), config, base_path=path, log=logger.debug)

        if dump_dereferenced is not None:
            codegen.check_output(output)
            dumped = json.dumps(codegen.schema, indent=2) + "\n"
            AtomicWriter().write(Path(dump_dereferenced), dumped, validate=False)

        out = codegen.generate_file(output)
    except (JSDocError, OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    logger.debug("\n%s\n", out)
    click.secho(f"Converted JSON schema to JSDoc file: {output}", fg="blue")

import json
import sys
from typing import TextIO

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .builders import empty_document, heading, is_empty, paragraph, simple_document
from .config import OUTPUT_FORMATS, ADFConfig
from .exceptions import ADFDecodeError, ADFError
from .extractor import extract_text
from .logging_config import log_operation, setup_logger
from .models import (
    is_adf_document,
    is_adf_node,
    is_bullet_list,
    is_heading,
    is_list_item,
    is_ordered_list,
    is_paragraph,
    is_text_node,
    validate_document,
)
from .renderers import to_markdown, to_plain_text
from .utils.io import load_adf_json

RENDERERS = {
    "text": to_plain_text,
    "markdown": to_markdown,
    "extract": extract_text,
}


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (default: ADF_OUTPUT_FORMAT or text)",
)
@click.option(
    "--validate",
    is_flag=True,
    help="Only check that the input is a well-formed ADF document",
)
@click.option(
    "--from-text",
    is_flag=True,
    help="Treat the input as plain text and print it as an ADF document",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=None,
    help="Enable/disable file logging (default: ADF_LOG_TO_FILE)",
)
def main(
    input_file: TextIO,
    output_format: str | None,
    validate: bool,
    from_text: bool,
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool | None,
) -> None:
    """Render an Atlassian Document Format (ADF) JSON value.

    Reads INPUT_FILE (stdin when omitted or "-") and prints it as plain text
    or markdown.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    try:
        config = ADFConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    logging_level = config.log_level
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    logger = setup_logger(
        name="atlassian-adf",
        level=logging_level,
        log_to_file=config.log_to_file if log_to_file is None else log_to_file,
        log_dir=log_dir or config.log_dir,
        stream=sys.stderr,
    )

    output_format = output_format or config.output_format
    raw = input_file.read()

    with log_operation(logger, "render", output_format=output_format):
        if from_text:
            logger.info("Building ADF document from plain text")
            click.echo(json.dumps(simple_document(raw), indent=2, ensure_ascii=False))
            return

        try:
            value = load_adf_json(raw)
        except ADFDecodeError as e:
            raise click.ClickException(str(e)) from e

        if validate:
            is_valid = validate_document(value)
            logger.info(f"Document validation result: {is_valid}")
            click.echo("valid" if is_valid else "invalid")
        else:
            click.echo(RENDERERS[output_format](value))

    if validate and not is_valid:
        sys.exit(1)


__all__ = [
    "main",
    "__version__",
    # Rendering
    "to_markdown",
    "to_plain_text",
    "extract_text",
    # Validation
    "validate_document",
    "is_adf_document",
    "is_adf_node",
    "is_text_node",
    "is_paragraph",
    "is_heading",
    "is_ordered_list",
    "is_bullet_list",
    "is_list_item",
    # Builders
    "empty_document",
    "simple_document",
    "paragraph",
    "heading",
    "is_empty",
    # Ambient
    "ADFConfig",
    "ADFError",
    "ADFDecodeError",
    "setup_logger",
    "log_operation",
]

if __name__ == "__main__":
    main()

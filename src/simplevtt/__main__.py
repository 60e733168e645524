from typing import Any, NoReturn
from pathlib import Path
from os import environ
import logging
import sys

import dotenv

from simplevtt.setup import config_setup, logging_setup, args_setup
from simplevtt.subtitling import ass_reader, vtt_writer
from simplevtt.subtitling.ass_reader import SubtitleReadError, SubtitleScanError
from simplevtt.subtitling.types import DialogueRecord
from simplevtt.tools.file_utils import formats

app_config: dict[str, Any] = None
logger: logging.Logger = None

def _fail(message: str) -> NoReturn:
    """Prints a fatal error and exits with status 1."""
    print(message)
    sys.exit(1)

def _load(input_file: Path) -> list[DialogueRecord]:
    """Reads the dialogue lines of an .ass file."""
    encoding: str = app_config['input']['encoding']

    if not formats.is_sub(input_file):
        logger.warning(f"Input does not look like an .ass/.ssa file, converting anyway: {input_file}")

    logger.debug(f"Reading dialogue from: {input_file}")
    try:
        data = ass_reader.read_bytes(input_file)
    except SubtitleReadError as e:
        _fail(f"Error opening file: {e}")

    try:
        content = ass_reader.decode(data, encoding)
    except SubtitleScanError as e:
        _fail(f"Error scanning .ass file: {e}")

    return ass_reader.parse_dialogue(ass_reader.iter_lines(content))

def _convert(dialogue: list[DialogueRecord]) -> str:
    """Sorts dialogue by start time and renders it as WebVTT."""
    dialogue = vtt_writer.sort_dialogue(dialogue)
    document = vtt_writer.render(dialogue)
    logger.info(f"Converted {len(dialogue)} cue(s)")
    return document

def _write_stdout(document: str) -> None:
    """Writes the document to stdout as UTF-8, whatever the console encoding is."""
    sys.stdout.flush()
    sys.stdout.buffer.write(document.encode('utf-8'))
    sys.stdout.buffer.flush()

def main(argv: list[str] | None = None):
    dotenv.load_dotenv()

    global app_config, logger

    # Parse arguments
    parser = args_setup.init_parser()
    args: args_setup.args = parser.parse_args(argv)

    if not args.source_file_path:
        _fail(args_setup.USAGE)

    config_str = args.config or environ.get("SIMPLEVTT_CONFIG")
    app_config = config_setup.load_config(Path(config_str) if config_str else None)

    log_dir_str = environ.get("SIMPLEVTT_LOG_DIR")
    log_dir = Path(log_dir_str) if log_dir_str else None

    logging_setup.setup_logging(
        console_level=app_config['logging']['console_level'],
        file_level=app_config['logging']['file_level'],
        log_to_file=app_config['logging']['log_to_file'],
        log_dir=log_dir
    )

    logger = logging.getLogger(__name__)

    input_file = Path(args.source_file_path)
    dialogue = _load(input_file)
    document = _convert(dialogue)

    if args.output:
        output_file = vtt_writer.write(document, Path(args.output))
        logger.info(f"Subtitles written: {output_file}")
    else:
        _write_stdout(document)


if __name__ == "__main__":
    main()

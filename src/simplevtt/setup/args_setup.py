from argparse import ArgumentParser, Namespace

import logging

logger = logging.getLogger(__name__)

USAGE: str = "Usage: simplevtt FILE"

class args(Namespace):
    source_file_path: str | None
    output: str | None
    config: str | None

def init_parser() -> ArgumentParser:
    """Initializes and configures the command-line interface argument parser.

    The source file is optional here so a missing path can be reported with
    the plain usage line instead of argparse's own error.

    Returns:
        ArgumentParser: The configured argument parser instance.
    """
    parser = ArgumentParser(prog='simplevtt',
                            description='Convert .ass subtitle dialogue to WebVTT')

    # Required arguments
    parser.add_argument('source_file_path',
                        nargs='?',
                        metavar='FILE',
                        help='Path to the .ass subtitle file')

    # Optional arguments
    parser.add_argument('-o', '--output',
                        metavar='OUTPUT FILE',
                        help='Write the WebVTT document to this file instead of stdout')
    parser.add_argument('--config',
                        metavar='CONFIG FILE',
                        help='Path to a YAML config file')

    return parser

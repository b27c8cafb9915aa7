"""
xmlrpc-proxygen - CLI Tool for Proxy Class Generation
Main entry point for command-line interface

Usage:
    xmlrpc-proxygen <serverUrl> <methodPrefix> <className> > SampleProxy.txt

The declaration block, one blank line and the definition block are printed
to stdout. Exit code 0 = success, 1 = error.
"""

import argparse
import sys
import traceback
from typing import Callable, List, Optional, Tuple

from loguru import logger
from pydantic import ValidationError

from ..builder.collector import ProxyClassCollector
from ..core.exceptions import ProxyGenException, RemoteFaultError
from ..core.interfaces import BaseIntrospectionClient
from ..core.schema import CommandLineArgs
from ..introspection.xmlrpc_client import XmlRpcIntrospectionClient
from ..util.logging import resolve_log_level, start_cli_log
from ..version import TOOL_NAME, __version__

USAGE_MESSAGE = (
    "There are 3 arguments: server URL, "
    "prefix for the methods to include (null to include methods without a prefix), "
    "and name to give the generated proxy class."
)

EXAMPLE = f"Example:  {TOOL_NAME} http://localhost/RPC2 system systemProxy"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with code 1 instead of 2"""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        print(EXAMPLE, file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=TOOL_NAME,
        description='Generate an xmlrpc-c C++ proxy class from a server\'s introspection data',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
{USAGE_MESSAGE}

Examples:
  # Proxy for the server's system.* methods
  {TOOL_NAME} http://localhost/RPC2 system systemProxy

  # Proxy for methods without a dot in their name
  {TOOL_NAME} http://localhost/RPC2 null rootProxy
        """
    )

    parser.add_argument('--version', action='version', version=f'{TOOL_NAME} {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument(
        'arguments',
        nargs='*',
        metavar='ARG',
        help='Server URL, method prefix and name of the generated class'
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Tuple[CommandLineArgs, bool]:
    """
    Parse the command line

    Args:
        argv: Arguments after the program name (default: sys.argv[1:])

    Returns:
        (CommandLineArgs, verbose flag)

    Note:
        Exits the process with code 1 on any usage error; this is the only
        place the tool exits early.
    """
    parser = build_parser()
    # Options may appear anywhere between the positionals
    namespace = parser.parse_intermixed_args(argv)

    if len(namespace.arguments) != 3:
        print(USAGE_MESSAGE, f"You specified {len(namespace.arguments)} arguments.", file=sys.stderr)
        print(EXAMPLE, file=sys.stderr)
        sys.exit(1)

    server_url, method_prefix, class_name = namespace.arguments
    try:
        cmdline = CommandLineArgs(
            server_url=server_url,
            method_prefix=method_prefix,
            class_name=class_name
        )
    except ValidationError as e:
        parser.error("; ".join(err["msg"] for err in e.errors()))

    return cmdline, namespace.verbose


def main(
    argv: Optional[List[str]] = None,
    client_factory: Callable[[str], BaseIntrospectionClient] = XmlRpcIntrospectionClient
) -> int:
    """
    Main CLI entry point

    Args:
        argv: Arguments after the program name (default: sys.argv[1:])
        client_factory: Builds the introspection client from the server URL

    Returns:
        Exit code (0 = success, 1 = error)
    """
    cmdline, verbose = parse_args(argv)

    try:
        start_cli_log(resolve_log_level(verbose))

        client = client_factory(cmdline.server_url)
        model = ProxyClassCollector(client).collect(
            cmdline.method_prefix,
            cmdline.class_name
        )

        # Output already written stays written if a later step fails
        sys.stdout.write(model.render_declaration())
        sys.stdout.flush()
        sys.stdout.write("\n")
        sys.stdout.write(model.render_definition())
        sys.stdout.flush()
        return 0

    except RemoteFaultError as e:
        print(f"{TOOL_NAME}: XML-RPC fault #{e.code}: {e.description}", file=sys.stderr)
        logger.debug("{}", e.to_dict())

    except ProxyGenException as e:
        print(f"{TOOL_NAME}: {e.message}", file=sys.stderr)
        logger.debug("{}", e.to_dict())

    except Exception as e:
        print(f"{TOOL_NAME}: {e}", file=sys.stderr)
        if verbose:
            traceback.print_exc()

    except KeyboardInterrupt:
        print(f"{TOOL_NAME}: Interrupted", file=sys.stderr)

    return 1


if __name__ == '__main__':
    sys.exit(main())

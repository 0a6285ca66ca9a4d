"""
ockit CLI argument parser.

This module implements the command-line interface for ockit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ockit.core.platform import SUPPORTED_OS_TYPES

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("ockit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """ockit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="ockit",
            description="ockit - install and run the OpenShift CLI on build agents",
            epilog='Use "ockit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"ockit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./ockit.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Directory searched for ockit.yaml (default: current directory)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_exec_command(subparsers)
        self._add_configmap_command(subparsers)

        return parser

    def _add_install_options(self, parser):
        """Add the options shared by every command that installs oc."""
        parser.add_argument(
            "--oc-version",
            metavar="VERSION",
            help="oc version (e.g., 4.11, v3.11.0) or archive URL (default: latest)",
        )
        parser.add_argument(
            "--os",
            dest="os_type",
            choices=SUPPORTED_OS_TYPES,
            metavar="OS",
            help="OS type (Linux|Darwin|Windows_NT) [default: detected]",
        )
        parser.add_argument(
            "--use-local-oc",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Use an oc already on PATH if it matches the requested version "
            "(--no-use-local-oc overrides the config file)",
        )
        parser.add_argument(
            "--proxy",
            metavar="HOST:PORT",
            help="Proxy used to download oc",
        )
        parser.add_argument(
            "--timeout",
            type=int,
            metavar="SECONDS",
            help="Network timeout in seconds (default: 30)",
        )

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Install oc and add it to PATH",
            description="Download and extract the oc CLI and print its path",
        )
        self._add_install_options(parser)

    def _add_exec_command(self, subparsers):
        """Add 'exec' subcommand."""
        parser = subparsers.add_parser(
            "exec",
            help="Install oc and run it",
            description="Install oc, then run it with the given argument line. "
            "${NAME} references are replaced from the environment.",
        )
        self._add_install_options(parser)
        parser.add_argument(
            "arg_line",
            metavar="ARGS",
            help='oc arguments as one string (e.g., "get pods -n ${NAMESPACE}")',
        )

    def _add_configmap_command(self, subparsers):
        """Add 'configmap' subcommand."""
        parser = subparsers.add_parser(
            "configmap",
            help="Patch a ConfigMap with oc",
            description="Patch ConfigMap data from -key value properties",
        )
        self._add_install_options(parser)
        parser.add_argument(
            "--name", required=True, metavar="NAME", help="ConfigMap name"
        )
        parser.add_argument(
            "--properties",
            default="",
            metavar="PROPS",
            help='Properties, e.g. \'-key1 value1 -key2 "value 2"\'',
        )
        parser.add_argument(
            "--namespace", default="", metavar="NS", help="Target namespace"
        )
        parser.add_argument(
            "--print-only",
            action="store_true",
            help="Print the oc command instead of running it",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "install": "ockit.cli.commands.install",
            "exec": "ockit.cli.commands.execute",
            "configmap": "ockit.cli.commands.configmap",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()

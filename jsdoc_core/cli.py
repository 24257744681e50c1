"""
Command line driver: find sources, resolve symbols, publish.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from . import logger
from .logger import DocLogger, enable_file_logging
from .options import DocOptions
from .publishers import PublisherFactory
from .resolver import SymbolResolver
from .source_finder import find_sources


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='jsdoc',
        description="Generate documentation from annotated JavaScript source files."
    )
    parser.add_argument('sources', nargs='+', metavar='SRC',
                        help="Source files or directories to document")
    parser.add_argument('-t', '--template',
                        help="Use this template to format the output (defaults to json)")
    parser.add_argument('-d', '--directory', type=Path,
                        help="Output to this directory (defaults to js_docs_out)")
    parser.add_argument('-r', '--recurse', type=int, metavar='DEPTH',
                        help="Descend into src directories")
    parser.add_argument('-x', '--ext', metavar='EXT[,EXT]...',
                        help="Scan source files with the given extension/s (defaults to js)")
    parser.add_argument('-a', '--allfunctions', action='store_true',
                        help="Include all functions, even undocumented ones")
    parser.add_argument('-A', '--Allfunctions', action='store_true',
                        help="Include all functions, even undocumented, underscored ones")
    parser.add_argument('-p', '--private', action='store_true',
                        help="Include symbols tagged as private")
    parser.add_argument('-c', '--config', type=Path,
                        help="Read options from this JSON file; command line flags take precedence")
    parser.add_argument('--log-dir', type=Path,
                        help="Also write a debug log to this directory")
    return parser


def options_from_args(args: argparse.Namespace) -> DocOptions:
    options = DocOptions.from_json_file(args.config) if args.config else DocOptions()

    if args.template:
        options.template = args.template
    if args.directory:
        options.directory = args.directory
    if args.recurse is not None:
        options.recurse = args.recurse
    if args.ext:
        options.extensions = [ext.strip() for ext in args.ext.split(',') if ext.strip()]
    if args.allfunctions:
        options.all_functions = True
    if args.Allfunctions:
        options.all_functions_underscored = True
    if args.private:
        options.include_private = True
    if args.log_dir:
        options.log_dir = args.log_dir
    return options


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    try:
        options = options_from_args(args)
        publisher = PublisherFactory.from_id(options.template)
    except (FileNotFoundError, KeyError, ValueError) as e:
        logger.error(str(e))
        return 1

    if options.log_dir:
        enable_file_logging(options.log_dir)

    sources = find_sources(args.sources, options.recurse, options.extensions)
    if not sources:
        logger.error("No source files found.")
        return 1

    resolver = SymbolResolver(options, DocLogger())
    files = resolver.resolve(sources)
    publisher.publish(files, options.directory)
    return 0

"""
pageslug — Fingerprinted Asset Page Tool
════════════════════════════════════════

Command line entry point exposing four commands:

  🔢 HASHING:
    • hash         — Print the 32-bit FNV-1a fingerprint of a file
    • hash-rename  — Rename a file to embed its fingerprint

  👀 WATCHING:
    • watch        — Block until something changes in a directory

  📄 PAGES:
    • page-tmpl    — Render an HTML page that references the newest
                     fingerprinted file for each asset

Usage:
    pageslug page-tmpl --out public/index.html public/*
    python -m pageslug hash public/app.js
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from pageslug import __version__
from pageslug.config import PageSlugConfig, get_config, set_config
from pageslug.errors import ArgumentError, FileAccessError, PageSlugError, TemplateError
from pageslug.fingerprint.renamer import fingerprint_file
from pageslug.manifest.builder import build_manifest
from pageslug.manifest.lookup import ManifestIndex
from pageslug.render.page import DEFAULT_PAGE_TEMPLATE, PageRenderer, page_base_name_for
from pageslug.utils.hashing import hash_file
from pageslug.watch.watcher import watch_directories

logger = logging.getLogger("pageslug")


# ─── Logging ───

def configure_logging(verbose: bool = False) -> None:
    config = get_config().logging
    logging.basicConfig(format=config.format, stream=sys.stderr)
    logger.setLevel(logging.DEBUG if verbose else config.level)


# ─── Application State ───

class PageSlugApp:
    """Application container running one command per invocation."""

    def __init__(self, config: PageSlugConfig | None = None, verbose: bool = False):
        if config:
            set_config(config)
        self.config = get_config()
        self.verbose = verbose

    def hash(self, path: str) -> str:
        return hash_file(path)

    def hash_rename(self, path: str, out: str | None = None) -> str:
        return str(fingerprint_file(path, out))

    def watch(self, dirs: list[str]) -> None:
        watch_directories(dirs)

    def export_template(self, path: str, force: bool = False) -> bool:
        """Write the default template to ``path``.

        Never overwrites an existing file unless ``force``; returns whether
        the file was written.
        """
        if not force and os.path.lexists(path):
            logger.info("Template file %r already exists, not overwriting", path)
            return False
        try:
            with open(path, "w", encoding=self.config.render.encoding) as f:
                f.write(DEFAULT_PAGE_TEMPLATE)
        except OSError as e:
            raise FileAccessError(path, f"Cannot write template file ({e.strerror or e})") from e
        logger.info("Wrote template file %r", path)
        return True

    def render_page(self, files: list[str], out: str | None, template_in: str | None = None) -> str:
        """Build the manifest from ``files`` and render the page to ``out``."""
        if not out:
            raise ArgumentError("--out output file is required")

        manifest = build_manifest(files)
        if self.verbose:
            logger.debug("Manifest after reading inputs: %r", manifest)

        lookup = ManifestIndex(manifest, verbose=self.verbose)
        renderer = PageRenderer(lookup, page_base_name_for(template_in))

        if template_in:
            source = self._read_text(template_in)
            output = renderer.render(source, name=os.path.basename(template_in))
        else:
            output = renderer.render_default()

        try:
            with open(out, "w", encoding=self.config.render.encoding) as f:
                f.write(output)
        except OSError as e:
            raise FileAccessError(out, f"Cannot write output file ({e.strerror or e})") from e
        logger.debug("Wrote %d characters to %r", len(output), out)
        return output

    def _read_text(self, path: str) -> str:
        try:
            with open(path, encoding=self.config.render.encoding) as f:
                return f.read()
        except OSError as e:
            raise FileAccessError(path, f"Cannot read template file ({e.strerror or e})") from e
        except UnicodeDecodeError as e:
            encoding = self.config.render.encoding
            raise TemplateError(f"Template {path!r} is not valid {encoding} (byte {e.start})") from e


# ─── Argument Parsing ───

def create_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="pageslug", description="Fingerprinted asset utilities")
    parser.add_argument("-v", "--verbose", action="store_true", help="Output more logging info")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    # --verbose is global but may also follow the command name
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Output more logging info",
    )

    hash_cmd = commands.add_parser("hash", parents=[common], help="Compute and print a hash for a file (32-bit FNV-1a)")
    hash_cmd.add_argument("input", metavar="in", help="Input file")

    rename_cmd = commands.add_parser(
        "hash-rename", parents=[common], help="Rename file to include its hash (32-bit FNV-1a)",
    )
    rename_cmd.add_argument("input", metavar="in", help="Input file")
    rename_cmd.add_argument(
        "--out",
        default=None,
        help="Output file (optional, defaults to rename alongside input file in same dir)",
    )

    watch_cmd = commands.add_parser("watch", parents=[common], help="Watch directories for changes")
    watch_cmd.add_argument(
        "dirs", nargs="*", help="Directories to watch (append /... to make it recursive)",
    )

    page_cmd = commands.add_parser("page-tmpl", parents=[common], help="Run page template tool")
    page_cmd.add_argument("--in", dest="template_in", default=None, help="Input template file")
    page_cmd.add_argument("--out", default=None, help="Output HTML file")
    page_cmd.add_argument(
        "--tmpl-out",
        default=None,
        help="Output default template file to this path (will not overwrite unless --force is specified)",
    )
    page_cmd.add_argument(
        "-f", "--force", action="store_true", help="Force overwrite of output template file",
    )
    page_cmd.add_argument("files", nargs="*", help="Files to make the template aware of")

    return parser


# ─── Command Handlers ───

def _handle_hash(app: PageSlugApp, args: argparse.Namespace) -> int:
    print(app.hash(args.input))
    return 0


def _handle_hash_rename(app: PageSlugApp, args: argparse.Namespace) -> int:
    app.hash_rename(args.input, args.out)
    return 0


def _handle_watch(app: PageSlugApp, args: argparse.Namespace) -> int:
    if not args.dirs:
        raise ArgumentError("One or more watch directories must be specified")
    app.watch(args.dirs)
    return 0


def _handle_page_tmpl(app: PageSlugApp, args: argparse.Namespace) -> int:
    # --tmpl-out only exports the default template, handy for new projects
    if args.tmpl_out:
        app.export_template(args.tmpl_out, force=args.force)
        return 0
    app.render_page(args.files, args.out, args.template_in)
    return 0


HANDLERS = {
    "hash": _handle_hash,
    "hash-rename": _handle_hash_rename,
    "watch": _handle_watch,
    "page-tmpl": _handle_page_tmpl,
}


# ─── Entry Point ───

def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.print_usage(sys.stderr)
        logger.critical("No command specified")
        return 1

    app = PageSlugApp(verbose=args.verbose)
    try:
        return handler(app, args)
    except PageSlugError as e:
        logger.critical("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())

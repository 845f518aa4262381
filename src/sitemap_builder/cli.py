import argparse
import sys
from pathlib import Path

from .config import FORMATS, load_document
from .errors import SitemapError
from .logger import set_log_level
from .sitemap import Sitemap


DEFAULT_CONFIG_NAME = "sitemap.yml"


def cmd_init(args):
    """Create a starter sitemap file in the current directory."""
    target = Path(args.path or DEFAULT_CONFIG_NAME)
    if target.exists() and not args.force:
        print(f"[WARN] Config file already exists: {target}", file=sys.stderr)
        return 1

    template = """# sitemap-builder file
#
# Usually you only need to edit:
# 1) sitemap.domain  - your site's base URL
# 2) items           - the pages to list

sitemap:
  escaping: true
  strict_mode: false
  default_format: "xml"
  domain: "https://example.com"
  # Split into several sitemaps plus an index above 50,000 URLs / max_size bytes
  use_limit_size: false
  max_size: 10485760
  use_gzip: false
  use_styles: true

# Used by the rss, rdf and html formats
channel:
  title: "Example"
  link: "https://example.com"
  description: "Latest pages"

items:
  - loc: "https://example.com/"
    priority: "1.0"
    freq: "daily"

  - loc: "https://example.com/about"
    lastmod: "2024-01-31T12:00:00+00:00"
    priority: "0.8"
    freq: "monthly"
    title: "About us"
    images:
      - url: "https://example.com/img/team.jpg"
        caption: "The team"

# A non-empty list turns the xml output into a sitemap index
sitemaps: []
"""
    target.write_text(template, encoding="utf-8")
    print(f"[OK] Created config file: {target}")
    return 0


def cmd_render(args):
    """Render the sitemap to stdout, or store it into --output."""
    config_path = Path(args.config or DEFAULT_CONFIG_NAME)
    if not config_path.exists():
        print(
            f"[ERROR] Config file not found: {config_path}. "
            f"Run `sitemap-builder init` first.",
            file=sys.stderr,
        )
        return 1

    if args.verbose:
        set_log_level("DEBUG")

    try:
        document = load_document(config_path)
        sitemap = Sitemap(document.config, channel=document.channel)
        sitemap.add_item(document.items)
        sitemap.reset_sitemaps(document.sitemaps)

        fmt = args.format or document.config.default_format
        if args.output:
            ok = sitemap.store(fmt, args.filename, args.output, style=args.style)
            if not ok:
                print("[ERROR] Storage backend reported a failed write", file=sys.stderr)
                return 1
            print(f"[OK] Stored {fmt} sitemap in {args.output}")
        else:
            if document.config.use_gzip:
                sys.stdout.buffer.write(sitemap.to_bytes(fmt, style=args.style))
            else:
                print(sitemap.render(fmt, style=args.style))
    except (SitemapError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sitemap-builder",
        description="Render XML/RSS/RDF/Google News/HTML/TXT sitemaps from a YAML file.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # init
    p_init = subparsers.add_parser(
        "init", help=f"Create a starter {DEFAULT_CONFIG_NAME} in current directory."
    )
    p_init.add_argument(
        "-p",
        "--path",
        help=f"Config file path (default: {DEFAULT_CONFIG_NAME})",
    )
    p_init.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing config file.",
    )
    p_init.set_defaults(func=cmd_init)

    # render
    p_render = subparsers.add_parser("render", help="Render the sitemap.")
    p_render.add_argument(
        "-c",
        "--config",
        help=f"Config file path (default: {DEFAULT_CONFIG_NAME})",
    )
    p_render.add_argument(
        "--format",
        choices=FORMATS,
        help="Output format (default: sitemap.default_format from the config).",
    )
    p_render.add_argument(
        "--style",
        help="XSL stylesheet href to reference from XML output.",
    )
    p_render.add_argument(
        "-o",
        "--output",
        help="Directory to store the sitemap in instead of printing it.",
    )
    p_render.add_argument(
        "--filename",
        default="sitemap",
        help="File name used with --output (default: sitemap).",
    )
    p_render.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    p_render.set_defaults(func=cmd_render)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 1

    return int(func(args)) or 0


if __name__ == "__main__":
    raise SystemExit(main())

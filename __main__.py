"""CLI entry point for shopforge.

This module acts as the central entry point for the project's CLI tools.
Page commands go through the same tool functions the MCP server exposes,
so the CLI and the server report failures identically.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from shopforge.config import get_available_llm_providers
from shopforge.core import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

PAGE_TYPES = ["landing", "product"]
PRESETS = ["minimalist", "bold", "luxury", "playful"]


# =============================================================================
# Shared Helpers
# =============================================================================


def _make_generator(provider: str | None):
    from shopforge.llm import PageGenerator

    return PageGenerator(provider=provider)


def _failed(result: dict[str, Any]) -> bool:
    if "errorKind" not in result:
        return False
    logger.error(f"{result['message']} ({result['errorKind']})")
    return True


def _format_page(result: dict[str, Any], fmt: str) -> str:
    if fmt == "jsx":
        return f"{result['componentCode']}\n\n/* styles */\n{result['cssCode']}"
    if fmt == "json":
        return json.dumps(result["structuredPage"], indent=2, ensure_ascii=False)
    return result["html"]


def _emit(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        logger.info(f"Saved to {output}")
    else:
        print(text)


def _add_page_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--provider",
        type=str,
        default=None,
        choices=["anthropic", "openai", "gemini", "groq"],
        help="LLM provider (default: AI_PROVIDER)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="html",
        choices=["html", "jsx", "json"],
        help="Output format (default: html)",
    )


# =============================================================================
# Generate Command
# =============================================================================


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    from shopforge.mcp.tools import generate_page

    logger.info(f"Generating {args.page_type} page for: {args.prompt}")
    result = generate_page(
        {
            "messages": [{"role": "user", "content": args.prompt}],
            "page_type": args.page_type,
            "reference_url": args.reference_url,
            "preset": args.preset,
        },
        _make_generator(args.provider),
    )
    if _failed(result):
        return 1

    _emit(_format_page(result, args.format), args.output)
    logger.info(f"Generated '{result['title']}' via {result['providerUsed']}")
    return 0


def handle_generate_command(argv: list[str]) -> int:
    """Handle generate-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . generate",
        description="Generate an e-commerce page from a description",
    )
    parser.add_argument("prompt", type=str, help="What the page is about")
    parser.add_argument(
        "--page-type",
        "-t",
        type=str,
        default="landing",
        choices=PAGE_TYPES,
        help="Page type (default: landing)",
    )
    parser.add_argument(
        "--preset",
        "-s",
        type=str,
        default=None,
        choices=PRESETS,
        help="Style preset (default: DEFAULT_PRESET)",
    )
    parser.add_argument(
        "--reference-url",
        type=str,
        default=None,
        help="Website to take design inspiration from",
    )
    _add_page_options(parser)

    args = parser.parse_args(argv)
    return cmd_generate(args)


# =============================================================================
# Variants Command
# =============================================================================


def cmd_variants(args: argparse.Namespace) -> int:
    """Handle the variants command."""
    from shopforge.mcp.tools import generate_variants

    logger.info(f"Generating variants for: {args.prompt}")
    result = generate_variants(
        {
            "message": args.prompt,
            "page_type": args.page_type,
            "reference_url": args.reference_url,
        },
        _make_generator(args.provider),
    )
    if _failed(result):
        return 1

    if args.output_dir:
        args.output_dir.mkdir(parents=True, exist_ok=True)
    for variant in result["variants"]:
        if args.output_dir:
            path = args.output_dir / f"{variant['id']}.html"
            path.write_text(variant["html"], encoding="utf-8")
            print(f"{variant['label']:<12} {variant['title']}  -> {path}")
        else:
            print(f"{variant['label']:<12} {variant['title']}  ({variant['style']})")
    logger.info(f"{len(result['variants'])} variant(s) generated")
    return 0


def handle_variants_command(argv: list[str]) -> int:
    """Handle variants-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . variants",
        description="Generate minimalist, bold and luxury versions of a page",
    )
    parser.add_argument("prompt", type=str, help="What the page is about")
    parser.add_argument(
        "--page-type",
        "-t",
        type=str,
        default="landing",
        choices=PAGE_TYPES,
        help="Page type (default: landing)",
    )
    parser.add_argument(
        "--reference-url",
        type=str,
        default=None,
        help="Website to take design inspiration from",
    )
    parser.add_argument(
        "--provider",
        type=str,
        default=None,
        choices=["anthropic", "openai", "gemini", "groq"],
        help="LLM provider (default: AI_PROVIDER)",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Directory to write one HTML file per variant",
    )

    args = parser.parse_args(argv)
    return cmd_variants(args)


# =============================================================================
# Insert Command
# =============================================================================


def cmd_insert(args: argparse.Namespace) -> int:
    """Handle the insert command."""
    from shopforge.mcp.tools import insert_section

    try:
        page_data = json.loads(args.page.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read page JSON {args.page}: {e}")
        return 1
    if not isinstance(page_data, dict):
        logger.error(f"{args.page} does not contain a page object")
        return 1

    result = insert_section(
        {
            "current_page_data": page_data,
            "page_type": args.page_type or page_data.get("pageType"),
            "section_id": args.section,
            "section_prompt": args.prompt,
            "section_label": args.label,
            "preset": args.preset,
        },
        _make_generator(args.provider),
    )
    if _failed(result):
        return 1

    _emit(_format_page(result, args.format), args.output)
    return 0


def handle_insert_command(argv: list[str]) -> int:
    """Handle insert-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . insert",
        description="Add or update one section of a saved page",
    )
    parser.add_argument(
        "page",
        type=Path,
        help="Structured page JSON (e.g. from 'generate --format json')",
    )
    parser.add_argument(
        "--section",
        type=str,
        default=None,
        help="Section template id (see 'python . templates')",
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=None,
        help="Section instruction (overrides the template's)",
    )
    parser.add_argument(
        "--label",
        type=str,
        default=None,
        help="Section label (overrides the template's)",
    )
    parser.add_argument(
        "--page-type",
        "-t",
        type=str,
        default=None,
        choices=PAGE_TYPES,
        help="Page type (default: from the page JSON)",
    )
    parser.add_argument(
        "--preset",
        "-s",
        type=str,
        default=None,
        choices=PRESETS,
        help="Style preset (default: the page's own)",
    )
    _add_page_options(parser)

    args = parser.parse_args(argv)
    if not args.section and not args.prompt:
        parser.error("one of --section or --prompt is required")
    return cmd_insert(args)


# =============================================================================
# Catalog Commands
# =============================================================================


def handle_templates_command(argv: list[str]) -> int:
    """List section templates."""
    from shopforge.mcp.tools import list_section_templates

    parser = argparse.ArgumentParser(
        prog="python . templates",
        description="List insertable section templates",
    )
    parser.add_argument(
        "--page-type",
        "-t",
        type=str,
        default=None,
        choices=PAGE_TYPES,
        help="Only templates for this page type",
    )
    args = parser.parse_args(argv)

    result = list_section_templates(args.page_type)
    if _failed(result):
        return 1

    for template in result["templates"]:
        print(
            f"{template['id']:<18} {template['pageType']:<8} "
            f"{template['category']:<14} {template['label']}"
        )
    return 0


def handle_models_command(_argv: list[str]) -> int:
    """List known models per provider."""
    from shopforge.llm import DEFAULT_MODELS, LLMModel, LLMProviderType

    configured = set(get_available_llm_providers())
    for provider in LLMProviderType:
        tag = "" if provider.value in configured else " (no API key)"
        print(f"{provider.value}{tag}:")
        for model in LLMModel.list_by_provider(provider):
            spec = model.spec
            default = " [default]" if DEFAULT_MODELS[provider] is model else ""
            print(f"  {spec.name:<32} {spec.context_window:>8} ctx{default}")
    return 0


# =============================================================================
# MCP Command
# =============================================================================


def handle_mcp_command(argv: list[str]) -> int:
    """Handle MCP server commands.

    Usage:
        python . mcp run              # Start in STDIO mode
        python . mcp serve            # Start in HTTP mode
        python . mcp serve --port 8080
    """
    if not argv or argv[0] not in ("run", "serve"):
        print("MCP Server Commands")
        print("\nUsage: python . mcp {run|serve} [options]")
        print("\nCommands:")
        print("  run                 Start server in STDIO mode")
        print("  serve               Start server in HTTP mode")
        print("\nOptions for 'serve':")
        print("  --host HOST         Bind address (default: 0.0.0.0)")
        print("  --port PORT         Port number (default: 18080)")
        print("  --transport TYPE    Transport: http or sse (default: http)")
        print("\nMCP client configuration:")
        print("  {")
        print('    "mcpServers": {')
        print('      "shopforge": {')
        print('        "command": "python",')
        print('        "args": [".", "mcp", "run"],')
        print('        "cwd": "/path/to/shopforge"')
        print("      }")
        print("    }")
        print("  }")
        return 1

    from shopforge.mcp.server import main as mcp_main

    if argv[0] == "run":
        return mcp_main(["--transport", "stdio", *argv[1:]])
    return mcp_main(["--transport", "http", *argv[1:]])


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Pages ===")
    print("  generate   Generate a landing or product page")
    print("  variants   Generate three styled versions of a page")
    print("  insert     Add or update a section of a saved page")
    print("  templates  List insertable section templates")
    print("  models     List supported LLM models")
    print("\n=== MCP Server ===")
    print("  mcp        Run MCP server (STDIO or HTTP mode)")
    print("\nExamples:")
    print("  python . generate 'Coffee shop called Morning Ritual' -o page.html")
    print("  python . generate 'Noise-cancelling headphones' -t product -f json -o page.json")
    print("  python . insert page.json --section product-reviews -o page.html")
    print("  python . variants 'Yoga studio' -o variants/")
    print("  python . mcp serve --port 18080")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "generate": handle_generate_command,
        "variants": handle_variants_command,
        "insert": handle_insert_command,
        "templates": handle_templates_command,
        "models": handle_models_command,
        "mcp": handle_mcp_command,
    }

    if command in commands:
        setup_logging()
        return commands[command](rest_args)

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())

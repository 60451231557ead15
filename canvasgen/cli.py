"""CLI entrypoints for canvasgen commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import ServiceUnavailable
from .helper_client import HelperClient
from .logging import configure_logging
from .orchestrator import GenerationOrchestrator
from .validators import CompletenessValidator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_project_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project",
        default=".",
        help="Path to the project root holding .canvasgen.yml (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canvasgen",
        description="Promote canvas elements into standalone component files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append debug-level logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Print the component source extracted from the canvas document.",
    )
    _add_verbose_option(extract_parser, suppress_default=True)
    _add_project_option(extract_parser)
    extract_parser.add_argument("component_id", help="Element type, e.g. card-2.")
    extract_parser.add_argument(
        "--source",
        default=None,
        help="Canvas document to read instead of the configured one.",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write src/components/<id>.tsx from the canvas (template fallback).",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_project_option(generate_parser)
    generate_parser.add_argument("component_id", help="Element type, e.g. card-2.")
    generate_parser.add_argument(
        "--remote",
        action="store_true",
        help="Ask the running canvasgen service to generate instead of writing locally.",
    )

    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete a generated component and remove its imports and usages.",
    )
    _add_verbose_option(delete_parser, suppress_default=True)
    _add_project_option(delete_parser)
    delete_parser.add_argument("component_id", help="Element type, e.g. card-2.")

    check_parser = subparsers.add_parser(
        "check",
        help="Fail when generated components are still placeholder stubs.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_project_option(check_parser)
    check_parser.add_argument(
        "component",
        nargs="?",
        default=None,
        help="Single component id or file to check (defaults to every component).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP generation service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_project_option(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind address.")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for canvasgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.project).expanduser().resolve())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "extract":
        orchestrator = GenerationOrchestrator(config)
        result = orchestrator.extract(args.component_id, args.source)
        if not result.success:
            parser.exit(1, f"canvasgen extract failed: {result.error}\n")
        sys.stdout.write(result.source or "")
    elif args.command == "generate":
        if args.remote:
            client = HelperClient(
                config.helper.base_url, request_timeout=config.helper.request_timeout
            )
            try:
                manifest = client.generate(args.component_id)
            except ServiceUnavailable as exc:
                parser.exit(1, f"{exc}\nStart it with `canvasgen serve`.\n")
        else:
            manifest = GenerationOrchestrator(config).generate(args.component_id)
        print(json.dumps(manifest.to_dict(), indent=2))
        if not manifest.success:
            parser.exit(1)
    elif args.command == "delete":
        report = GenerationOrchestrator(config).delete(args.component_id)
        print(json.dumps(report.to_dict(), indent=2))
        if not report.success:
            parser.exit(1)
    elif args.command == "check":
        _run_check(parser, config.root, config.components_dir, args.component)
    elif args.command == "serve":
        from .service import run_service

        run_service(
            host=args.host or config.service.host,
            port=args.port or config.service.port,
            orchestrator_factory=lambda: GenerationOrchestrator(config),
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_check(
    parser: argparse.ArgumentParser,
    root: Path,
    components_dir: Path,
    component: str | None,
) -> None:
    if component is None and not components_dir.is_dir():
        print(f"No components directory at {_relativize(components_dir, root)}.")
        return

    validator = CompletenessValidator(root, components_dir)
    try:
        report = validator.check(component)
    except FileNotFoundError as exc:
        parser.exit(2, f"{exc}\n")

    if not report.ok:
        listing = "\n".join(f"  - {path}" for path in report.stub_paths())
        parser.exit(
            1,
            "Component(s) are placeholder stubs. Copy the full UI from the canvas document for each type.\n\n"
            f"{listing}\n",
        )
    print("Component(s) have full UI.")


def _relativize(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])

"""Render a single component (or the page template) from the command line.

Usage example:

    govuk-render button --params '{"text": "Save and continue"}'
    govuk-render template --params-file page.json > page.html
    python -m govuk_frontend --list

Parameters are the component's macro options as a JSON object. Component
names are kebab case (``back-link``); macro style names such as
``govukBackLink`` or ``backLink`` are accepted too.

Exit status is 0 on success and 2 for any usage, parameter or
configuration problem.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence

from . import COMPONENTS
from .config import configure_logging, validate_settings
from .errors import ConfigurationError, GovukFrontendError
from .template import govuk_template
from .utils.text import capitalise, to_camel_case, to_spaced

logger = logging.getLogger("govuk_frontend.cli")

EXIT_USAGE = 2


def _renderers() -> Dict[str, Callable[..., Any]]:
    return {**COMPONENTS, "template": govuk_template}


def resolve_component(name: str) -> Callable[..., Any]:
    """Find a renderer by kebab-case or macro-style name; KeyError if unknown."""
    renderers = _renderers()
    if name in renderers:
        return renderers[name]
    aliases = {}
    for kebab, renderer in renderers.items():
        aliases[to_camel_case(kebab)] = renderer
        aliases[f"govuk{capitalise(to_camel_case(kebab))}"] = renderer
    return aliases[name]


def _load_params(args: argparse.Namespace) -> Dict[str, Any]:
    if args.params_file:
        raw = Path(args.params_file).read_text(encoding="utf-8")
    else:
        raw = args.params or "{}"
    params = json.loads(raw)
    if not isinstance(params, dict):
        raise ValueError("parameters must be a JSON object")
    return params


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="govuk-render",
        description="Render a GOV.UK Frontend component as HTML",
    )
    parser.add_argument("component", nargs="?", help="Component name, e.g. back-link, or 'template'")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--params", help="Component options as a JSON object")
    source.add_argument("--params-file", help="Path to a JSON file with the component options")
    parser.add_argument("--list", action="store_true", help="List the available components and exit")
    args = parser.parse_args(argv)
    if not args.list and not args.component:
        parser.error("a component name is required (see --list)")
    return args


def _fail(message: str) -> int:
    print(f"govuk-render: error: {message}", file=sys.stderr)
    return EXIT_USAGE


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        validate_settings()
    except ConfigurationError as exc:
        return _fail(str(exc))
    configure_logging()

    if args.list:
        for name in sorted(_renderers()):
            print(f"{name:<22}{to_spaced(name)}")
        return 0

    try:
        renderer = resolve_component(args.component)
    except KeyError:
        return _fail(f"unknown component {args.component!r} (see --list)")

    try:
        params = _load_params(args)
    except OSError as exc:
        return _fail(f"cannot read parameters: {exc}")
    except ValueError as exc:
        return _fail(f"invalid parameters: {exc}")

    try:
        html = renderer(params)
    except GovukFrontendError as exc:
        logger.debug("render failed for %s", args.component, exc_info=True)
        return _fail(str(exc))

    logger.debug("rendered %s (%d characters)", args.component, len(html))
    print(html)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())

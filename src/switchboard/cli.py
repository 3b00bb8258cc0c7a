"""CLI entry point for the switchboard agent router."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import cast

from switchboard import __version__
from switchboard.catalog.loader import get_catalog
from switchboard.catalog.models import AgentId
from switchboard.config import default_config_path, load_config
from switchboard.context.files import FileSetError, load_file_set
from switchboard.context.models import to_serializable
from switchboard.routing.router import AgentRouter
from switchboard.server.runner import run_server


def _router() -> AgentRouter:
    return AgentRouter(get_catalog(), load_config(default_config_path()))


def _load_files(router: AgentRouter, path: Path) -> dict[str, str]:
    try:
        return load_file_set(
            path,
            max_file_bytes=router.config.max_file_bytes,
            max_files=router.config.max_files,
        )
    except FileSetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_agents(args: argparse.Namespace) -> None:
    catalog = get_catalog()
    term = cast(str | None, args.search)
    agents = catalog.search_by_keyword(term) if term is not None else catalog.all()

    if args.json:
        payload = [
            a.model_dump(mode="json", by_alias=True, exclude={"prompt_template"}) for a in agents
        ]
        print(json.dumps(payload, indent=2))
        return

    if not agents:
        print(f"No agents match '{term}'.")
        return
    for agent in agents:
        print(f"{agent.id.value:<24} {agent.name}")
        print(f"{'':<24} {agent.description}")


def _cmd_show(args: argparse.Namespace) -> None:
    agent_id = cast(str, args.agent_id)
    agent = get_catalog().lookup(AgentId(agent_id))

    print(f"{agent.name} ({agent.id.value})")
    print(agent.description)
    print(f"\nExpertise: {', '.join(agent.expertise)}")
    print("\nCapabilities:")
    for capability in agent.capabilities:
        print(f"  - {capability}")
    print(f"\nKeywords: {', '.join(agent.keywords)}")
    if args.prompt:
        print("\nPrompt template:\n")
        print(agent.prompt_template)


def _cmd_analyze(args: argparse.Namespace) -> None:
    router = _router()
    files = _load_files(router, cast(Path, args.path))
    context = router.analyze_project_context(files, cast(str, args.request))
    serializable = to_serializable(context)

    if args.json:
        print(json.dumps(serializable.model_dump(mode="json", by_alias=True), indent=2))
        return

    print(f"Files:        {serializable.file_count}")
    print(f"Type:         {serializable.type.value}")
    print(f"Technologies: {', '.join(serializable.technologies) or '-'}")
    print(f"Frameworks:   {', '.join(serializable.frameworks) or '-'}")
    print(f"Dependencies: {len(serializable.dependencies)}")
    print(
        f"Features:     tests={serializable.has_tests} database={serializable.has_database}"
        f" docker={serializable.has_docker} ci={serializable.has_ci}"
    )


def _cmd_select(args: argparse.Namespace) -> None:
    router = _router()
    files = _load_files(router, cast(Path, args.path))
    result = router.route(files, cast(str, args.request))

    if args.json:
        payload = result.model_dump(mode="json", by_alias=True)
        if not args.scores:
            payload.pop("scores", None)
        print(json.dumps(payload, indent=2))
        return

    selection = result.selection
    agent = router.lookup(selection.selected_agent)
    print(f"Agent:      {agent.name} ({agent.id.value})")
    print(f"Confidence: {selection.confidence:.2f}")
    print(f"Reasoning:  {selection.reasoning}")
    if selection.suggested_agents:
        print(f"Also consider: {', '.join(a.value for a in selection.suggested_agents)}")
    if args.scores:
        print("\nScores:")
        for entry in result.scores:
            print(f"  {entry.agent.value:<24} {entry.score:.2f}")


def _cmd_serve(args: argparse.Namespace) -> None:
    config = load_config(default_config_path())
    port = cast(int | None, args.port)
    if port is not None:
        config.port = port
    run_server(config)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="switchboard",
        description="Pick the specialist agent best suited to a project and request",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"switchboard {__version__}"
    )
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # agents subcommand
    agents_p = subparsers.add_parser("agents", help="List or search the agent catalog")
    _ = agents_p.add_argument("--search", default=None, help="Keyword, name or description term")
    _ = agents_p.add_argument("--json", action="store_true", help="Print JSON")

    # show subcommand
    show_p = subparsers.add_parser("show", help="Show one agent")
    _ = show_p.add_argument("agent_id", choices=[a.value for a in AgentId])
    _ = show_p.add_argument("--prompt", action="store_true", help="Include the prompt template")

    # analyze subcommand
    analyze_p = subparsers.add_parser("analyze", help="Derive the project context of a directory")
    _ = analyze_p.add_argument("path", type=Path, help="Project root directory")
    _ = analyze_p.add_argument("--request", default="", help="User request text")
    _ = analyze_p.add_argument("--json", action="store_true", help="Print JSON")

    # select subcommand
    select_p = subparsers.add_parser("select", help="Select an agent for a directory and request")
    _ = select_p.add_argument("path", type=Path, help="Project root directory")
    _ = select_p.add_argument("--request", default="", help="User request text")
    _ = select_p.add_argument("--json", action="store_true", help="Print JSON")
    _ = select_p.add_argument("--scores", action="store_true", help="Include ranked scores")

    # serve subcommand
    serve_p = subparsers.add_parser("serve", help="Start the HTTP API server")
    _ = serve_p.add_argument("--port", type=int, default=None, help="Port (default: config)")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    dispatch = {
        "agents": _cmd_agents,
        "show": _cmd_show,
        "analyze": _cmd_analyze,
        "select": _cmd_select,
        "serve": _cmd_serve,
    }
    command = cast(str | None, args.command)
    handler = dispatch.get(command) if command is not None else None
    if handler:
        handler(args)
    else:
        parser.print_help()
        sys.exit(1)

#!/usr/bin/env python3
"""
Command-line interface for the storefront client.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run the browse-cart-checkout scenario
    test        Run the test suite
    serve       Start the stub storefront backend

Examples:
    uv run python cli.py demo
    uv run python cli.py demo --remote
    uv run python cli.py serve --reload
"""

import argparse
import asyncio
import subprocess

from shared.settings import StorefrontSettings, configure_logging


def run_demo(remote: bool, settings: StorefrontSettings) -> None:
    """Run the demo against the in-process stub, or the configured backend."""
    from storefront.demo import run_checkout_demo

    if not remote:
        asyncio.run(run_checkout_demo())
        return

    from gateway.client import ApiGateway

    async def _run() -> None:
        async with ApiGateway(settings.api_base_url, timeout=settings.request_timeout) as gateway:
            await run_checkout_demo(gateway)

    asyncio.run(_run())


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the stub storefront backend."""
    cmd = ["uv", "run", "uvicorn", "gateway.stub_api:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting stub backend at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Storefront Client CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s demo --remote
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run the checkout scenario")
    demo_parser.add_argument(
        "--remote",
        action="store_true",
        help="Use the backend at STOREFRONT_API_URL instead of the in-process stub",
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the stub backend")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()
    settings = StorefrontSettings.from_env()
    configure_logging(settings.log_level)

    if args.command == "demo":
        run_demo(args.remote, settings)
    elif args.command == "test":
        run_tests(args.pytest_args)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

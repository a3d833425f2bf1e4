"""Command-line interface for publishing an OIDC setup placeholder package."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, NoReturn, Optional, TextIO

from npm_oidc_setup import __version__
from npm_oidc_setup.config import ConfigError, Settings, default_settings, load_settings
from npm_oidc_setup.log import configure_logging
from npm_oidc_setup.naming import InvalidPackageNameError, validate_package_name
from npm_oidc_setup.publisher import NpmPublisher, Publisher, PublishError, format_publish_command
from npm_oidc_setup.templates import write_placeholder_package
from npm_oidc_setup.workspace import PlaceholderWorkspace

PROG = "setup-npm-trusted-publish"
ACCESS_LEVELS = ("public", "restricted")

_DESCRIPTION = "Setup npm package for trusted publishing with OIDC by publishing a placeholder package"

_EPILOG = f"""\
Example:
  {PROG} my-package
  {PROG} @scope/my-package

Note:
  This tool creates and publishes a placeholder package for OIDC setup.
  The package contains only a README.md that clearly indicates it's for
  OIDC configuration purposes only.
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


@dataclass(frozen=True)
class InvocationOptions:
    """Parsed command-line options."""

    package_name: Optional[str]
    dry_run: bool = False
    access: str = "public"
    settings_path: Optional[str] = None
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("package_name", nargs="?", metavar="package-name", help="The name of the npm package to setup")
    parser.add_argument("-v", "--version", action="version", version=__version__, help="Show version")
    parser.add_argument("--dry-run", action="store_true", help="Create the package but don't publish")
    parser.add_argument(
        "--access",
        choices=ACCESS_LEVELS,
        default="public",
        help="Access level for scoped packages (public/restricted) [default: public]",
    )
    parser.add_argument("--settings", default=None, help="Path to settings YAML.")
    parser.add_argument("--verbose", action="store_true", help="Print debug diagnostics.")
    return parser


def parse_options(argv: List[str] | None = None) -> InvocationOptions:
    args = build_parser().parse_args(argv)
    return InvocationOptions(
        package_name=args.package_name,
        dry_run=args.dry_run,
        access=args.access,
        settings_path=args.settings,
        verbose=args.verbose,
    )


def _print_manual_instructions(
    package_dir: Path, package_name: str, access: str, executable: str, out: TextIO
) -> None:
    print("  cd " + str(package_dir), file=out)
    print("  " + format_publish_command(package_name, access, executable), file=out)


def _publish_placeholder(
    options: InvocationOptions,
    package_name: str,
    package_dir: Path,
    settings: Settings,
    publisher: Publisher,
    out: TextIO,
    err: TextIO,
) -> int:
    executable = settings.registry.executable

    write_placeholder_package(package_dir, package_name)
    print("✅ Created placeholder package files", file=out)

    if options.dry_run:
        print("\n🔍 Dry run mode - package created but not published", file=out)
        print(f"📁 Package location: {package_dir}", file=out)
        print("\nTo publish manually:", file=out)
        _print_manual_instructions(package_dir, package_name, options.access, executable, out)
        return 0

    print("\n📤 Publishing package to npm...", file=out)
    try:
        publisher.publish(package_dir, package_name, options.access)
    except PublishError as exc:
        print("\n❌ Failed to publish package", file=err)
        print(f"Error: {exc}", file=err)
        print(f"\n📁 Package files are still available at: {package_dir}", file=out)
        print("You can try publishing manually:", file=out)
        _print_manual_instructions(package_dir, package_name, options.access, executable, out)
        return 1

    print(f"\n✅ Successfully published: {package_name}", file=out)
    print(f"\n🔗 View your package at: {settings.registry.package_url(package_name)}", file=out)
    print("\nNext steps:", file=out)
    print(f"1. Go to {settings.registry.access_url(package_name)}", file=out)
    print("2. Configure OIDC trusted publishing", file=out)
    print("3. Set up your CI/CD workflow to publish with OIDC", file=out)
    return 0


def run(
    options: InvocationOptions,
    *,
    settings: Settings | None = None,
    publisher: Publisher | None = None,
    temp_root: str | Path | None = None,
    token_factory: Callable[[], str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Create, optionally publish, and clean up a placeholder package; return the exit code."""
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    settings = settings or default_settings()

    package_name = options.package_name
    if not package_name:
        print("Error: Package name is required", file=err)
        print(f"Usage: {PROG} <package-name>", file=err)
        return 1

    try:
        validate_package_name(package_name)
    except InvalidPackageNameError as exc:
        print(f"Error: {exc}", file=err)
        print(
            "Package names must be lowercase and can contain letters, numbers, hyphens, periods, and underscores",
            file=err,
        )
        return 1

    if publisher is None:
        publisher = NpmPublisher(settings.registry.executable)

    workspace = PlaceholderWorkspace(
        temp_root=temp_root if temp_root is not None else settings.workspace.temp_root,
        prefix=settings.workspace.prefix,
        token_factory=token_factory,
        keep=options.dry_run,
        warn_stream=err,
        info_stream=out,
    )
    try:
        package_dir = workspace.create()
    except OSError as exc:
        print(f"\n❌ Error: {exc}", file=err)
        return 1

    print(f"📦 Creating placeholder package: {package_name}", file=out)
    print(f"📁 Temp directory: {package_dir}", file=out)

    with workspace:
        try:
            return _publish_placeholder(options, package_name, package_dir, settings, publisher, out, err)
        except Exception as exc:  # noqa: BLE001
            print(f"\n❌ Error: {exc}", file=err)
            return 1


def main(argv: List[str] | None = None) -> int:
    options = parse_options(argv)
    configure_logging("DEBUG" if options.verbose else "WARNING")
    try:
        settings = load_settings(options.settings_path) if options.settings_path else default_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not options.verbose:
        configure_logging(settings.log.level)
    return run(options, settings=settings)


if __name__ == "__main__":
    sys.exit(main())

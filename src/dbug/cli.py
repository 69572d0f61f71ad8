"""Command-line entry point for dbug.

Logs a message from a shell script under a label, honoring the same
DEBUG filter as the library:

  DEBUG=deploy:* dbug deploy:upload "sent 14 files"
  dbug --filter '*' build "done"

Also answers a few questions about labels without logging anything:

  dbug --color deploy:upload     # 256-color code for the label
  dbug --check deploy:upload     # enabled/disabled under current filter
  dbug --demo                    # walk through the logger features
"""

import argparse
import sys
import time

from dbug._version import VERSION
from dbug.colors import color_for
from dbug.config import ENV_VAR, resolve_filter_spec
from dbug.logger import Logger


# Pause in the demo between the second and third line, in milliseconds
DEMO_DELAY_MS = 158


class _Sample:
    """Stand-in object whose repr shows up in demo output."""

    def __init__(self, thing):
        self.thing = thing

    def __repr__(self):
        return f"Sample(thing={self.thing!r})"


def run_demo(filter_spec=None, file=None, sleep=time.sleep):
    """Run the feature walkthrough.

    With no filter given and DEBUG unset, everything is enabled so the
    demo has something to show.
    """
    spec = resolve_filter_spec(filter_spec)
    if spec is None:
        spec = "*"

    debugger = Logger("label", filter_spec=spec, file=file)
    debugger.log("hello world")
    debugger.log("hello world 2")

    # Simulate a slow function; the next line reports the pause
    sleep(DEMO_DELAY_MS / 1000)

    sample = _Sample("is a hand")
    debugger.log(f"hello world 3: {sample!r}")
    debugger.log_formatted("hello world 3.5: {!r}", sample)
    debugger.log("hello world 4")

    extended = debugger.extend("extended")
    extended.log("extended hello world")
    extended.extend("deep").log("more")

    something = Logger("something", filter_spec=spec, file=file)
    log = something.as_callback()
    log("hello from something")
    something.extend("extended_again").as_callback()("extended hello world")


def _build_parser():
    """Build the argparse parser for the dbug command."""
    parser = argparse.ArgumentParser(
        prog="dbug",
        description="dbug — label-scoped colorized debug logging",
        epilog=(
            f"Lines are printed only for labels enabled by ${ENV_VAR}\n"
            "(or --filter). Examples:\n"
            f"  {ENV_VAR}='app:* -app:db'   everything under app: except app:db\n"
            f"  {ENV_VAR}='*,-secret'       everything except 'secret'"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"dbug {VERSION}",
    )
    parser.add_argument("--filter", metavar="SPEC", default=None,
                        help=f"Filter spec to use instead of ${ENV_VAR}")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--color", metavar="LABEL",
                      help="Print the 256-color code assigned to LABEL")
    mode.add_argument("--check", metavar="LABEL",
                      help="Print whether LABEL is enabled (exit 1 if not)")
    mode.add_argument("--demo", action="store_true", default=False,
                      help="Run a short demonstration of the logger")

    parser.add_argument("label", nargs="?", help="Label to log under")
    parser.add_argument("message", nargs="*", help="Message words")
    return parser


def main(argv=None):
    """Main entry point for the dbug CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    # Labels from argv may carry undecodable bytes as lone surrogates;
    # write them back out as the original bytes
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")

    try:
        if args.color is not None:
            print(color_for(args.color))
            return 0

        if args.check is not None:
            enabled = Logger(args.check, filter_spec=args.filter).enabled
            print("enabled" if enabled else "disabled")
            return 0 if enabled else 1

        if args.demo:
            run_demo(args.filter)
            return 0

        if args.label is None:
            parser.print_help()
            return 0

        Logger(args.label, filter_spec=args.filter).log(" ".join(args.message))
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())

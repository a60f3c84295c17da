import argparse
from typing import Optional
from ..utils import shell
from .context import build_context
from .project import GeneratorError, generate

USAGE = "erlnew PATH [--app APP] [--module MODULE] [--sup]"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="erlnew",
        usage=USAGE,
        description="Create a new Erlang project built with mix.",
        allow_abbrev=False,
    )
    p.add_argument("path", metavar="PATH", help="Directory of the new project")
    # Positionals after PATH are accepted and ignored
    p.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    p.add_argument("--app", help="OTP application name (default: last segment of PATH)")
    p.add_argument("--module", help="Name of the generated module (default: APP)")
    p.add_argument(
        "--sup",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Also generate the application callback and a supervisor",
    )
    return p


def main(argv=None, confirm: Optional[shell.Confirm] = None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    context = build_context(args.path, app=args.app, module=args.module, sup=args.sup)

    try:
        generate(context, confirm=confirm or shell.yes, notify=shell.creating)
    except (GeneratorError, OSError) as e:
        shell.error(str(e))
        return 1
    return 0

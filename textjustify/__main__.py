import argparse
import logging
import sys

from .errors import InvalidInput
from .justify import justify_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="textjustify", description="Justify text to a fixed line width.")
    parser.add_argument("width", type=int, help="line width in characters")
    parser.add_argument("file", nargs="?", type=argparse.FileType("r"), default=sys.stdin,
                        help="text to justify, defaults to stdin")
    parser.add_argument("--show-width", action="store_true", help="prefix every line with its length")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug information to stderr")
    args = parser.parse_intermixed_args(argv)
    if args.width < 1:
        parser.error("width must be a positive integer")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    with args.file as f:
        text = f.read()

    try:
        lines = justify_text(text, args.width)
    except InvalidInput as e:
        print(f"textjustify: {e}", file=sys.stderr)
        return 2

    if args.show_width:
        print("\n".join([f"{len(l):02d}:  {l}" for l in lines]))
    elif lines:
        print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""passgen command-line interface.

Usage examples:
    python -m passgen generate -n 20 -c 5
    python -m passgen generate --no-symbols
    python -m passgen classify 'Ab1!Ab1!Ab1!'
    python -m passgen classify -f passwords.txt
"""

import argparse
import logging
import sys

from passgen import (
    CharacterClass,
    GenerationRequest,
    PassgenError,
    config,
    generate,
    strength_report,
)

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords and rate password strength.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate secure passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=config.DEFAULT_LENGTH,
        help=f"Password length (default: {config.DEFAULT_LENGTH}, "
             f"range: {config.MIN_LENGTH}-{config.MAX_LENGTH})",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-digits", action="store_true")
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument("-v", "--verbose", action="store_true")

    # ── classify ───────────────────────────────────────────────────────
    cls_p = sub.add_parser("classify", help="Rate the strength of passwords")
    cls_p.add_argument("passwords", nargs="*", help="Passwords to classify")
    cls_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )
    cls_p.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "generate":
            return _cmd_generate(args)
        return _cmd_classify(args)
    except PassgenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _cmd_generate(args: argparse.Namespace) -> int:
    if args.count < 1:
        print("Error: --count must be at least 1", file=sys.stderr)
        return 1

    excluded = {
        CharacterClass.UPPERCASE: args.no_uppercase,
        CharacterClass.LOWERCASE: args.no_lowercase,
        CharacterClass.DIGIT: args.no_digits,
        CharacterClass.SYMBOL: args.no_symbols,
    }
    classes = [c for c in CharacterClass if not excluded[c]]
    request = GenerationRequest(args.length, frozenset(classes))
    log.debug(
        "generating %d password(s): length=%d classes=%s entropy=%.1f bits",
        args.count, request.length,
        ",".join(c.label for c in classes), request.entropy_bits,
    )

    for _ in range(args.count):
        pwd = generate(request)
        report = strength_report(pwd)
        print(f"  {pwd}  ({report['tier'].value}, {request.entropy_bits} bits)")

    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                passwords.extend(line.rstrip("\r\n") for line in f if line.strip())
        except OSError as exc:
            print(f"Error: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as exc:
            print(f"Error: cannot read {args.file}: {exc.reason}", file=sys.stderr)
            return 1

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    log.debug("classifying %d password(s)", len(passwords))

    for pwd in passwords:
        report = strength_report(pwd)
        print(f"  {report['tier'].value:<7} score {report['score']}/6  '{pwd}'")
        for s in report["suggestions"]:
            print(f"            ! {s}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

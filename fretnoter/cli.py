#!/usr/bin/env python3
"""
fretnoter command line.

Usage:
    fretnoter query C E G            # chords matching C E G, one per line
    fretnoter query CEG "A C E" -c   # several queries, one summary line each
    fretnoter scale C "Major (Ionian)"
    fretnoter chord A m7
    fretnoter chords C "Major (Ionian)" --filter maj
    fretnoter board E Dorian --tuning DADGAD
    fretnoter list scales
"""
import argparse
import re
import sys
from importlib.metadata import version, PackageNotFoundError

from fretnoter.analysis import chords_in_scale, chord_labels, filter_chords
from fretnoter.builders import build_scale, build_chord
from fretnoter.catalog import scale_names, chord_names
from fretnoter.constants import DEFAULT_FRETS, DEFAULT_TUNING, NOTES
from fretnoter.detection import detect_chord
from fretnoter.errors import FretnoterError
from fretnoter.fretboard import parse_tuning, scale_board, chord_board, render_text

# One note per token: a letter with an optional '#', or any other single
# non-space character so that bad input reaches the engine and is reported.
_NOTE_TOKEN_RE = re.compile(r"[A-Za-z]#?|\S")


def _program_version():
    try:
        return version("fretnoter")
    except PackageNotFoundError:
        return "Undefined"


def fault(err, message):
    print(f"Error: {message}: {err}", file=sys.stderr)
    sys.exit(1)


def split_notes(text):
    """'C E G', 'CEG' and 'C#EG#' all split into separate note names."""
    return _NOTE_TOKEN_RE.findall(text)


# ── Sub-commands ──────────────────────────────────────────────────────────────

def cmd_query(args):
    queries = [" ".join(args.notes)] if not args.compact else args.notes
    for query in queries:
        try:
            found = detect_chord(split_notes(query))
        except FretnoterError as e:
            fault(e, "Detecting chord failed")
        if args.compact:
            if found:
                print(f"{query}: {', '.join(found)}")
        else:
            for label in found:
                print(label)


def cmd_scale(args):
    try:
        print(" ".join(build_scale(args.root, args.name)))
    except FretnoterError as e:
        fault(e, "Building scale failed")


def cmd_chord(args):
    try:
        print(" ".join(build_chord(args.root, args.name)))
    except FretnoterError as e:
        fault(e, "Building chord failed")


def cmd_chords(args):
    try:
        chords = chords_in_scale(args.root, args.name)
    except FretnoterError as e:
        fault(e, "Listing chords in scale failed")

    keep = set(filter_chords(chord_labels(chords), args.filter))
    for chord_root in NOTES:
        names = [n for n in chords.get(chord_root, []) if chord_root + n in keep]
        if not names:
            continue
        print(f"{chord_root}: {', '.join(names)}")


def cmd_board(args):
    try:
        tuning = parse_tuning(args.tuning)
        if args.chord:
            board = chord_board(tuning, args.root, args.name, frets=args.frets)
        else:
            board = scale_board(tuning, args.root, args.name, frets=args.frets)
    except FretnoterError as e:
        fault(e, "Building fretboard failed")
    print(render_text(board))


def cmd_list(args):
    names = scale_names() if args.what == "scales" else chord_names()
    for name in names:
        print(name)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fretnoter", description="Scales, chords and chord detection on a 12-tone alphabet."
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {_program_version()}")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("query", aliases=["q"], help="Detect chords from notes (first note is the root)")
    p.add_argument("notes", nargs="+", help="Note names, e.g. C E G or CEG")
    p.add_argument("-c", "--compact", action="store_true",
                   help="Treat each argument as its own query and print 'query: chord, chord...'")
    p.set_defaults(func=cmd_query)

    p = sub.add_parser("scale", help="Print the notes of a scale")
    p.add_argument("root")
    p.add_argument("name")
    p.set_defaults(func=cmd_scale)

    p = sub.add_parser("chord", help="Print the notes of a chord")
    p.add_argument("root")
    p.add_argument("name")
    p.set_defaults(func=cmd_chord)

    p = sub.add_parser("chords", help="List the chords playable within a scale")
    p.add_argument("root")
    p.add_argument("name")
    p.add_argument("--filter", default="", help="Case-insensitive regex on labels like 'Cmaj7'")
    p.set_defaults(func=cmd_chords)

    p = sub.add_parser("board", help="Draw a scale or chord on a fretboard")
    p.add_argument("root")
    p.add_argument("name")
    p.add_argument("--chord", action="store_true", help="NAME is a chord rather than a scale")
    p.add_argument("--tuning", default=DEFAULT_TUNING, help=f"Open strings, low to high (default: {DEFAULT_TUNING})")
    p.add_argument("--frets", type=int, default=DEFAULT_FRETS)
    p.set_defaults(func=cmd_board)

    p = sub.add_parser("list", help="List catalog names")
    p.add_argument("what", choices=["scales", "chords"])
    p.set_defaults(func=cmd_list)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()

from __future__ import annotations
import argparse
import os
import random
import sys
from typing import Callable, Optional

from markov import MarkovChain, MarkovError

MENU = "Type b-build map, p-print map, g-generate text, s-start over, x-to exit: "


def read_corpus(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return f.read()


def _readable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


def prompt_file(ask: Callable[[str], str] = input) -> str:
    filename = ask("Input file name?  ").strip()
    while not _readable(filename):
        filename = ask("Invalid file, try again: ").strip()
    return filename


def _ask_int(ask, prompt: str, retry: str, ok: Callable[[int], bool]) -> int:
    raw = ask(prompt)
    while True:
        try:
            value = int(raw.strip())
        except ValueError:
            value = None
        if value is not None and ok(value):
            return value
        raw = ask(retry)


def prompt_order(ask: Callable[[str], str] = input) -> int:
    return _ask_int(ask, "Value of N?  ", "N must be > 1, try again: ", lambda v: v > 1)


def prompt_total_words(order: int, ask: Callable[[str], str] = input) -> int:
    return _ask_int(
        ask,
        "Total words you'd like to generate?  ",
        "Total words must be at least N, try again: ",
        lambda v: v >= order,
    )


def build(mc: MarkovChain, filename: str):
    try:
        mc.add_text(read_corpus(filename))
    except (OSError, MarkovError) as e:
        print(f"Warning: failed to build from {filename}: {e}", file=sys.stderr)
        return
    print(f"...Building map: {filename}...")
    print()


def command_loop(
    mc: MarkovChain,
    filename: str,
    total_words: int,
    rng: random.Random,
    ask: Callable[[str], str] = input,
):
    """
    Menu loop over a single chain.

    b builds from `filename` (each build re-reads the file and accumulates),
    p prints the map, g generates `total_words` words, s clears and asks for a
    new file and settings, x or end of input exits.
    """
    while True:
        try:
            command = ask(MENU).strip()
        except EOFError:
            return
        if command == "b":
            build(mc, filename)
        elif command == "p":
            for line in mc.format_lines():
                print(line)
            print()
        elif command == "g":
            try:
                print("..." + mc.generate_text(total_words, rng) + "...")
            except MarkovError as e:
                print(f"Cannot generate text: {e}")
            print()
        elif command == "s":
            mc.clear()
            try:
                filename = prompt_file(ask)
                order = prompt_order(ask)
                total_words = prompt_total_words(order, ask)
            except EOFError:
                return
            mc.order = order
        elif command == "x":
            return


def main(argv: Optional[list] = None, ask: Callable[[str], str] = input):
    ap = argparse.ArgumentParser(description="Generate random text from an n-gram model of a document.")
    ap.add_argument("--corpus", help="Path to a plain-text corpus file")
    ap.add_argument("--order", type=int, default=None, help="N, the number of words per n-gram (>= 2)")
    ap.add_argument("--words", type=int, default=None, help="Total words to generate (>= N)")
    ap.add_argument("--rng-seed", type=int, default=None)
    ap.add_argument("--generate", action="store_true", help="Build once, print one generated text and exit")
    ap.add_argument("--print-map", action="store_true", help="Build once, print the map and exit")
    args = ap.parse_args(argv)

    if args.order is not None and args.order < 2:
        raise SystemExit("N must be > 1.")
    if args.words is not None and args.words < (args.order or 2):
        raise SystemExit("Total words must be at least N.")

    rng = random.Random(args.rng_seed)

    if args.generate or args.print_map:
        if not args.corpus:
            raise SystemExit("--corpus is required with --generate/--print-map.")
        mc = MarkovChain(order=args.order or 3)
        if args.words is not None and args.words < mc.order:
            raise SystemExit("Total words must be at least N.")
        try:
            mc.add_text(read_corpus(args.corpus))
        except (OSError, MarkovError) as e:
            raise SystemExit(f"Cannot build map from {args.corpus}: {e}")
        if args.print_map:
            for line in mc.format_lines():
                print(line)
        if args.generate:
            try:
                print(mc.generate_text(args.words or mc.order, rng))
            except MarkovError as e:
                raise SystemExit(f"Cannot generate text: {e}")
        return

    print("Welcome to the Text Generator.")
    print("This program makes random text based on a document.")
    try:
        filename = args.corpus if args.corpus and _readable(args.corpus) else prompt_file(ask)
        order = args.order if args.order is not None else prompt_order(ask)
        total_words = args.words if args.words is not None and args.words >= order else prompt_total_words(order, ask)
    except EOFError:
        return

    command_loop(MarkovChain(order=order), filename, total_words, rng, ask)


if __name__ == "__main__":
    main()

from __future__ import annotations
import argparse, json, logging, sys
from . import config as CFG
from .engine import Engine
from .driver import run, respond


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Spelling suggestions by edit distance")
    p.add_argument("--dictionary", default=CFG.DEFAULT_DICTIONARY,
                   help="Dictionary name, loaded from <root>/<name>.txt")
    p.add_argument("--threshold", type=int, default=CFG.DEFAULT_THRESHOLD,
                   help="Maximum edit distance of a suggestion")
    p.add_argument("--root", default=CFG.DICTIONARY_DIR, help="Folder holding dictionaries")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--json", action="store_true", help="Emit JSON rows (with --q)")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    try:
        eng = Engine.from_dictionary(args.dictionary, root=args.root, threshold=args.threshold)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.q is not None:
        rows = eng.rank(args.q)
        if args.json:
            print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
        else:
            for line in respond(rows):
                print(line)
        return 0

    try:
        return run(eng)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    raise SystemExit(main())

"""
Compile the bundled affinwords.txt from an upstream AFINN word list.

Accepts AFINN-111 / AFINN-165 style files (`term<TAB>score` per line, terms may
contain spaces), plain or .gz. Writes comma-separated `term score` records.
Usage:
  python -m sentiment_rate.tools.build_lexicon --tsv /path/to/AFINN-111.txt[.gz] [--force]
"""
import os, argparse, gzip, io, sys
from collections import Counter

from ..lexicon_model import resource_path

def _open_any(path: str):
    if path.endswith(".gz"):
        return io.TextIOWrapper(gzip.open(path, "rb"), encoding="utf-8", errors="ignore")
    return open(path, "r", encoding="utf-8", errors="ignore")

def read_afinn(path: str):
    terms = {}
    with _open_any(path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "\t" in line:
                term, _, raw = line.rpartition("\t")
            else:
                term, _, raw = line.rpartition(" ")
            try:
                val = int(raw.strip())
            except ValueError:
                continue
            term = term.strip()
            # the resource format uses commas as record separators
            if term and "," not in term:
                terms[term] = val
    return terms

def render(terms) -> str:
    return ",".join(f"{t} {v}" for t, v in terms.items())

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--tsv", required=True, help="Path to AFINN word list (.txt/.tsv/.gz)")
    ap.add_argument("--out", default=resource_path())
    ap.add_argument("--force", action="store_true", help="Write even if small (<100 terms)")
    args = ap.parse_args(argv)

    terms = read_afinn(args.tsv)
    print(f"Parsed {len(terms)} terms.")
    c = Counter(v for v in terms.values())
    print("Score histogram:", sorted(c.items()))

    if len(terms) < 100 and not args.force:
        sys.exit("Parsed <100 terms; pass --force if using a tiny subset, or check the file path/format.")

    d = os.path.dirname(args.out)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        f.write(render(terms))
    print(f"Saved {args.out}")

if __name__ == "__main__":
    main()

"""
Identicon sample renderer: writes PNGs for one or more hashes.

Usage:
  python render_samples.py 098f6bcd4621d373cade4e832627b4f6          # writes <hash>.png here
  python render_samples.py HASH1 HASH2 -o out/ -s 128                 # several, 128px
  python render_samples.py -f hashes.txt -o out/ -t                   # one hash per line, transparent
"""

import argparse
import os
import sys

from identicon.engine import DEFAULT_SIZE, IdenticonError, create_renderer


def read_hashes(path):
    """Non-empty, non-comment lines of a text file."""
    with open(path, encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def output_name(hash_value, index):
    # Hashes can hold anything; fall back to a numbered name
    if hash_value.isalnum() and len(hash_value) <= 64:
        return f"{hash_value}.png"
    return f"identicon-{index}.png"


def main():
    parser = argparse.ArgumentParser(description="Render identicon PNGs from hashes")
    parser.add_argument("hashes", nargs="*", help="Hash strings to render")
    parser.add_argument("-f", "--file", help="Text file with one hash per line")
    parser.add_argument("-o", "--output", default=".", help="Output folder")
    parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE, help="Edge in pixels")
    parser.add_argument("-t", "--transparent", action="store_true", help="Key out the white background")
    args = parser.parse_args()

    hashes = list(args.hashes)
    if args.file:
        hashes.extend(read_hashes(args.file))
    if not hashes:
        parser.error("no hashes given")

    os.makedirs(args.output, exist_ok=True)
    renderer = create_renderer()

    print(f"Rendering {len(hashes)} identicons at {args.size}px...\n")
    success = 0
    for i, h in enumerate(hashes):
        out_path = os.path.join(args.output, output_name(h, i))
        try:
            image = renderer.render(h, args.size, args.transparent)
        except IdenticonError as e:
            print(f"[{h}] failed: {e}")
            continue
        with open(out_path, "wb") as f:
            f.write(image.data)
        print(f"[{h}] → {out_path} ({image.length} bytes)")
        success += 1

    print(f"\nDone: {success}/{len(hashes)} rendered → {args.output}")
    if success != len(hashes):
        sys.exit(1)


if __name__ == "__main__":
    main()

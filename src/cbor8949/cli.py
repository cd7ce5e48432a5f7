from __future__ import annotations
import argparse, json, sys
from .binary.codecs.bitcursor import Bits
from .binary.codecs.major_type import read_major_type
from .models.item import DecodedItem, nesting_depth
from .models.result import Ok

# JSON rendering recurses once per array level
MAX_RENDER_DEPTH = 128


def _input_bits(args) -> Bits:
    if args.hex:
        return Bits(bytes.fromhex(args.input))
    from .binary.reader import _load_bytes
    return Bits(_load_bytes(args.input))


def cmd_info(args):
    from .binary.reader import ParseError, iter_items, summarize_file

    try:
        bits = _input_bits(args)
    except (OSError, ValueError) as e:
        print(f"Error: cannot read input: {e}", file=sys.stderr)
        return 1

    # Fast path: count items without building the JSON view
    if args.summary:
        try:
            items, consumed = summarize_file(bits, max_items=args.first_n)
        except ParseError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"items={items}, bytes={consumed}")
        return 0

    out = []
    for index, result in enumerate(iter_items(bits, max_items=args.first_n)):
        offset = bits.tell()
        if not isinstance(result, Ok):
            print(f"Error: item {index} at byte {offset // 8}: {result.describe()}", file=sys.stderr)
            print(json.dumps(out, indent=2))
            return 1
        if nesting_depth(result.value) > MAX_RENDER_DEPTH:
            print(f"Error: item {index} at byte {offset // 8}: arrays nested deeper than {MAX_RENDER_DEPTH} cannot be printed as JSON (try --summary)", file=sys.stderr)
            print(json.dumps(out, indent=2))
            return 1
        tag, _ = read_major_type(bits)
        out.append(DecodedItem(index=index, major_type=tag, offset=offset // 8, value=result.value).model_dump(mode="json"))
        bits = result.remainder

    print(json.dumps(out, indent=2))
    if not out:
        print("Warning: No items found in the input", file=sys.stderr)
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="cbor8949", description="Decode CBOR (major types 0-4)")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="print decoded items as JSON or a fast summary")
    sp.add_argument("input", help="Path to a CBOR file (or a hex string with --hex)")
    sp.add_argument("--hex", action="store_true", help="Treat INPUT as hex-encoded bytes")
    sp.add_argument("--summary", action="store_true", help="Print item count and bytes consumed only")
    sp.add_argument("--first-n", type=int, default=None, help="Stop after N top-level items")
    sp.set_defaults(func=cmd_info)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())

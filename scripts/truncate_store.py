import sys
from pathlib import Path

def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: truncate_store.py <file> [bytes]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    n = int(sys.argv[2]) if len(sys.argv) == 3 else 1
    b = p.read_bytes()
    if len(b) <= n:
        print("File too small to truncate safely.")
        raise SystemExit(2)

    # Dropping bytes from the last point's timestamp must fail the whole import,
    # not just the last gesture.
    p.write_bytes(b[:-n])
    print(f"Truncated {n} bytes from {p} ({len(b) - n} bytes remain)")

if __name__ == "__main__":
    main()

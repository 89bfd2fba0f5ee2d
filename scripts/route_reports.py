import logging
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from civicmatch import Coordinate, IssueCategory, setup_from_env  # noqa: E402

SAMPLE_REPORTS = [
    ("Bangalore", Coordinate(12.9716, 77.5946), "100 Feet Road, Indiranagar, Bangalore, Karnataka, 560038"),
    ("Mumbai", Coordinate(19.0760, 72.8777), "Linking Road, Bandra, Mumbai, Maharashtra, 400050"),
    ("Kalyan", Coordinate(19.2403, 73.1305), "Casa Rio Gold Road, Kalyan, Maharashtra, 421204, India"),
    ("Delhi", Coordinate(28.7041, 77.1025), "Chandni Chowk, Delhi, 110006"),
    ("Chennai", Coordinate(13.0827, 80.2707), "Anna Salai, Chennai, Tamil Nadu, 600002"),
    ("Hyderabad", Coordinate(17.3850, 78.4867), "Banjara Hills, Hyderabad, Telangana, 500034"),
    ("Panaji", Coordinate(15.4909, 73.8278), "Miramar, Panaji, Goa, 403001"),
]


def main() -> None:
    level = os.getenv("CIVICMATCH_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    matcher = setup_from_env()
    total = 0
    unmatched = 0

    for label, coord, address in SAMPLE_REPORTS:
        for category in IssueCategory:
            results = matcher.find_authorities(coord, address, category)
            total += 1
            if not results:
                unmatched += 1
                print(f"warn {label:<10} {category.value:<15} -> no authority matched")
                continue
            summary = ", ".join(f"{r.handle} ({r.confidence:.1f})" for r in results)
            print(f"ok   {label:<10} {category.value:<15} -> {summary}")

    print(f"reports={total} unmatched={unmatched}")


if __name__ == "__main__":
    main()
